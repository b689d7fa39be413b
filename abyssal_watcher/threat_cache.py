"""Process-wide cache of threat signatures that have been learned."""

import threading

_lock = threading.Lock()
_known: set[str] = set()


def is_known_threat(signature: str) -> bool:
    """Return True if the signature has been learned before."""
    with _lock:
        return signature in _known


def learn_threat(signature: str) -> None:
    """Remember the signature as a known threat."""
    with _lock:
        _known.add(signature)