"""Append-only log of messages sealed with AES-256-GCM."""

from pathlib import Path

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from abyssal_watcher.secure_kms import generate_key, generate_nonce

DEFAULT_LOG_PATH = "secure.log"


def log_secure(message: str, path: str | Path = DEFAULT_LOG_PATH) -> bytes:
    """Encrypt the message with a fresh key and nonce and append it to the log.

    Returns the ciphertext written.
    """
    cipher = AESGCM(generate_key())
    ciphertext = cipher.encrypt(generate_nonce(), message.encode("utf-8"), None)
    with open(path, "ab") as log_file:
        log_file.write(ciphertext)
    return ciphertext