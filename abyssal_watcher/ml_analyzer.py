"""Behavioural analysis of payloads by known indicator substrings."""

INDICATORS: tuple[str, ...] = (
    "inject",
    "obfuscate",
    "allocate_ex",
    "shellcode",
    "xor_loop",
    "fork_bomb",
)


def analyze_behavior(payload: str) -> bool:
    """Return True if the payload contains any known behavioural indicator."""
    return any(indicator in payload for indicator in INDICATORS)