"""Basic anomaly detection for smart malware and unusual behaviour."""


def detect_anomaly(payload: str) -> bool:
    """Return True if the payload hints at memory injection or polymorphism."""
    return "memory_injection" in payload or "polymorphic" in payload