"""Built-in threat signatures and an analyzer that looks events up by id."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Signature:
    """A named threat signature with a severity from 1 to 10."""

    id: str
    description: str
    category: str
    severity: int


DEFAULT_SIGNATURES: tuple[Signature, ...] = (
    Signature(
        id="unusual_port_usage",
        description="Unusual port activity",
        category="network",
        severity=6,
    ),
    Signature(
        id="code_injection_detected",
        description="Possible code injection",
        category="memory",
        severity=9,
    ),
)


class ThreatAnalyzer:
    """Maps event names to signatures and scores them by severity."""

    def __init__(self, signatures: Iterable[Signature] = DEFAULT_SIGNATURES) -> None:
        self.signatures: dict[str, Signature] = {sig.id: sig for sig in signatures}

    def analyze(self, event: str) -> Signature | None:
        """Return the signature matching the event, or None."""
        return self.signatures.get(event)

    def score(self, event: str) -> int:
        """Return ten times the event's severity, or 0 for unknown events."""
        signature = self.signatures.get(event)
        return signature.severity * 10 if signature else 0