"""Generation of random keys and nonces for authenticated encryption."""

import secrets

KEY_SIZE = 32
NONCE_SIZE = 12


def generate_key() -> bytes:
    """Return a fresh random 256-bit key."""
    return secrets.token_bytes(KEY_SIZE)


def generate_nonce() -> bytes:
    """Return a fresh random 96-bit nonce."""
    return secrets.token_bytes(NONCE_SIZE)