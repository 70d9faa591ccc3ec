"""Key and nonce validation for cipherkit."""

from __future__ import annotations

from ..errors import CryptoFailureError, KeyFormatError
from .constants import CHACHA_NONCE_SIZE, ED25519_SIGNATURE_SIZE, KEY_SIZE


def validate_key(key: bytes, expected: int = KEY_SIZE, algorithm: str = "key") -> bytes:
    """Check that key material has exactly the required size.

    Oversized keys are rejected rather than truncated.

    Args:
        key: The raw key bytes.
        expected: Required length in bytes.
        algorithm: Algorithm name for the error message.

    Returns:
        The key as immutable bytes.

    Raises:
        KeyFormatError: If the key length differs from ``expected``.
    """
    if len(key) != expected:
        raise KeyFormatError(
            f"Invalid {algorithm} key length: {len(key)} bytes, expected {expected}"
        )
    return bytes(key)


def validate_nonce(nonce: bytes) -> bytes:
    """Check that a decryption nonce has the AEAD nonce size.

    Raises:
        CryptoFailureError: If the nonce size is wrong. The message is the
            same one used for authentication failures.
    """
    if len(nonce) != CHACHA_NONCE_SIZE:
        raise CryptoFailureError("Decryption failed")
    return bytes(nonce)


def truncate_signature(signature: bytes) -> bytes:
    """Return the first 64 bytes of an Ed25519 signature candidate.

    Raises:
        CryptoFailureError: If fewer than 64 bytes were supplied.
    """
    if len(signature) < ED25519_SIGNATURE_SIZE:
        raise CryptoFailureError(
            f"Invalid signature length: {len(signature)} bytes, "
            f"expected {ED25519_SIGNATURE_SIZE}"
        )
    return bytes(signature[:ED25519_SIGNATURE_SIZE])
