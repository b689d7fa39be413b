"""Multi-layer threat detection of payloads with encrypted audit logging."""

__version__ = "0.1.0"