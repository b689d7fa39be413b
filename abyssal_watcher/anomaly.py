"""Real-time threat detection against a database of anomaly signatures."""

import json
import logging
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/anomaly_signatures.json"


class SignatureDBError(Exception):
    """Raised when the signature database cannot be read or parsed."""


def load_signatures(path: str | Path = DEFAULT_DB_PATH) -> set[str]:
    """Read a JSON document of the form {"signatures": [...]} into a set."""
    try:
        contents = Path(path).read_text()
    except OSError as exc:
        raise SignatureDBError("Missing signature DB") from exc
    try:
        document = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise SignatureDBError(f"Invalid signature DB: {exc}") from exc
    if not isinstance(document, dict) or "signatures" not in document:
        raise SignatureDBError("Invalid signature DB: missing field 'signatures'")
    signatures = document["signatures"]
    if not isinstance(signatures, list) or not all(
        isinstance(item, str) for item in signatures
    ):
        raise SignatureDBError("Invalid signature DB: 'signatures' must be a list of strings")
    return set(signatures)


_default_lock = threading.Lock()
_default_signatures: frozenset[str] | None = None


def _shared_signatures() -> frozenset[str]:
    """Load the default database once; fall back to an empty set on failure."""
    global _default_signatures
    with _default_lock:
        if _default_signatures is None:
            try:
                _default_signatures = frozenset(load_signatures())
            except SignatureDBError as exc:
                logger.error("Failed to load signature DB: %r", exc)
                _default_signatures = frozenset()
        return _default_signatures


class Anomaly:
    """An observed signature that may match a known threat."""

    def __init__(self, signature: str, signatures: set[str] | frozenset[str] | None = None) -> None:
        self.signature = signature
        self._signatures = signatures

    @property
    def known_signatures(self) -> frozenset[str] | set[str]:
        if self._signatures is None:
            return _shared_signatures()
        return self._signatures

    def is_threat(self) -> bool:
        """Return True if the signature is in the database."""
        return self.signature in self.known_signatures

    def respond(self) -> bool:
        """Log the outcome of the check; return True if a threat was found."""
        if self.is_threat():
            logger.warning(
                "THREAT DETECTED: [%s] - Initiating countermeasures...", self.signature
            )
            return True
        logger.info("No threat from [%s].", self.signature)
        return False