"""Zero-Exposure protection layer."""

import logging

_log = logging.getLogger(__name__)

_BANNER = "[ZE_MODE] Activated: Zero-Exposure Protection Layer online."


class ZEProtector:
    """Inspects data for markers of advanced attacks."""

    MARKERS: tuple[str, ...] = ("rce", "exploit", "apt")
    _active: bool = False

    @staticmethod
    def activate() -> str:
        """Bring the protection layer online and return its banner."""
        ZEProtector._active = True
        _log.info("Zero-Exposure protection layer activated")
        print(_BANNER)
        return _BANNER

    @staticmethod
    def inspect(data: str) -> bool:
        """Return True if the data contains an advanced-threat marker."""
        return any(marker in data for marker in ZEProtector.MARKERS)