"""ChaCha20-Poly1305 authenticated encryption for cipherkit."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from ..errors import CryptoFailureError, UnsupportedAlgorithmError
from ..types import AeadFormat, ByteSource, EncryptResult, KeyMap
from .constants import CHACHA20POLY1305_KEY_NAME, CHACHA_KEY_SIZE, CHACHA_NONCE_SIZE
from .stream import read_all
from .validation import validate_key, validate_nonce

logger = logging.getLogger("cipherkit")


class Encryptor(ABC):
    """Seals a complete byte stream."""

    @abstractmethod
    def encrypt(self, source: ByteSource) -> EncryptResult:
        """Encrypt the full contents of ``source`` under a fresh nonce.

        Args:
            source: The plaintext stream or bytes.

        Returns:
            The ciphertext (with tag) and the nonce used.
        """
        pass  # pragma: no cover


class Decryptor(ABC):
    """Opens a complete byte stream."""

    @abstractmethod
    def decrypt(self, source: ByteSource, nonce: bytes) -> bytes:
        """Decrypt the full contents of ``source``.

        Args:
            source: Binary ciphertext with the tag appended. Wire text must
                already be decoded by the caller.
            nonce: The nonce returned by the matching encryption.

        Returns:
            The plaintext bytes.

        Raises:
            CryptoFailureError: If authentication fails for any reason.
        """
        pass  # pragma: no cover


class ChaCha20Poly1305Cipher(Encryptor, Decryptor):
    """ChaCha20-Poly1305 with a 32-byte key, 12-byte nonce and no associated data."""

    def __init__(self, key: bytes) -> None:
        self._cipher = ChaCha20Poly1305(validate_key(key, CHACHA_KEY_SIZE, "chacha20poly1305"))

    def encrypt(self, source: ByteSource) -> EncryptResult:
        plaintext = read_all(source)
        nonce = os.urandom(CHACHA_NONCE_SIZE)
        try:
            ciphertext = self._cipher.encrypt(nonce, plaintext, None)
        except (ValueError, OverflowError) as e:
            raise CryptoFailureError("Encryption failed") from e
        return EncryptResult(ciphertext=ciphertext, nonce=nonce)

    def decrypt(self, source: ByteSource, nonce: bytes) -> bytes:
        ciphertext = read_all(source)
        nonce = validate_nonce(nonce)
        try:
            return self._cipher.decrypt(nonce, ciphertext, None)
        except (InvalidTag, ValueError):
            # One message for every cause; no chained detail
            raise CryptoFailureError("Decryption failed") from None

    @staticmethod
    def generate() -> KeyMap:
        """Generate a random 32-byte ChaCha20-Poly1305 key."""
        return {CHACHA20POLY1305_KEY_NAME: ChaCha20Poly1305.generate_key()}


_CIPHERS: dict[AeadFormat, type[ChaCha20Poly1305Cipher]] = {
    AeadFormat.CHACHA20_POLY1305: ChaCha20Poly1305Cipher,
}


def _lookup(fmt: AeadFormat) -> type[ChaCha20Poly1305Cipher]:
    try:
        fmt = AeadFormat(fmt)
    except ValueError:
        raise UnsupportedAlgorithmError(f"Unsupported AEAD format: {fmt}") from None
    cipher = _CIPHERS.get(fmt)
    if cipher is None:
        raise UnsupportedAlgorithmError(f"AEAD format {fmt} is not implemented")
    return cipher


def create_encryptor(key: bytes, fmt: AeadFormat) -> Encryptor:
    """Build an encryptor for ``fmt`` from raw key bytes.

    Raises:
        KeyFormatError: If the key is not exactly 32 bytes.
        UnsupportedAlgorithmError: If ``fmt`` is a reserved variant.
    """
    encryptor = _lookup(fmt)(key)
    logger.debug("Created %s encryptor", fmt)
    return encryptor


def create_decryptor(key: bytes, fmt: AeadFormat) -> Decryptor:
    """Build a decryptor for ``fmt`` from raw key bytes.

    Raises:
        KeyFormatError: If the key is not exactly 32 bytes.
        UnsupportedAlgorithmError: If ``fmt`` is a reserved variant.
    """
    decryptor = _lookup(fmt)(key)
    logger.debug("Created %s decryptor", fmt)
    return decryptor


def generate_aead_key(fmt: AeadFormat) -> KeyMap:
    """Generate a key for an AEAD algorithm.

    Returns:
        Mapping of canonical artifact name to raw key bytes.
    """
    return _lookup(fmt).generate()


def process_encrypt(source: ByteSource, key: bytes, fmt: AeadFormat) -> EncryptResult:
    """Encrypt the full contents of ``source`` with ``key``."""
    return create_encryptor(key, fmt).encrypt(source)


def process_decrypt(source: ByteSource, key: bytes, nonce: bytes, fmt: AeadFormat) -> bytes:
    """Decrypt the full contents of ``source`` with ``key`` and ``nonce``."""
    return create_decryptor(key, fmt).decrypt(source, nonce)
