"""BLAKE3 keyed-hash and Ed25519 signing for cipherkit."""

from __future__ import annotations

import hmac
import logging
import os
from abc import ABC, abstractmethod

import blake3
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519
from nacl.bindings import crypto_core_ed25519_is_valid_point

from ..errors import CryptoFailureError, KeyFormatError, UnsupportedAlgorithmError
from ..types import ByteSource, KeyMap, SignatureFormat
from .constants import (
    BLAKE3_KEY_NAME,
    BLAKE3_KEY_SIZE,
    ED25519_PUBLIC_KEY_SIZE,
    ED25519_SEED_SIZE,
    ED25519_SIGNING_KEY_NAME,
    ED25519_VERIFYING_KEY_NAME,
)
from .stream import read_all
from .validation import truncate_signature, validate_key

logger = logging.getLogger("cipherkit")


class Signer(ABC):
    """Produces a signature over a complete byte stream."""

    @abstractmethod
    def sign(self, source: ByteSource) -> bytes:
        """Sign the full contents of ``source``.

        Args:
            source: The input stream or bytes.

        Returns:
            The raw signature bytes.
        """
        pass  # pragma: no cover


class Verifier(ABC):
    """Checks a signature over a complete byte stream."""

    @abstractmethod
    def verify(self, source: ByteSource, signature: bytes) -> bool:
        """Verify ``signature`` over the full contents of ``source``.

        Args:
            source: The input stream or bytes.
            signature: The candidate signature.

        Returns:
            True if the signature matches, False otherwise.
        """
        pass  # pragma: no cover


class Blake3Signer(Signer, Verifier):
    """BLAKE3 keyed hash. The same key signs and verifies."""

    def __init__(self, key: bytes) -> None:
        self._key = validate_key(key, BLAKE3_KEY_SIZE, "blake3")

    def _digest(self, source: ByteSource) -> bytes:
        return blake3.blake3(read_all(source), key=self._key).digest()

    def sign(self, source: ByteSource) -> bytes:
        return self._digest(source)

    def verify(self, source: ByteSource, signature: bytes) -> bool:
        # compare_digest returns False on length mismatch
        return hmac.compare_digest(self._digest(source), bytes(signature))

    @staticmethod
    def generate() -> KeyMap:
        """Generate a random 32-byte BLAKE3 key."""
        return {BLAKE3_KEY_NAME: os.urandom(BLAKE3_KEY_SIZE)}


# Verification uses the same keyed hash
Blake3Verifier = Blake3Signer


class Ed25519Signer(Signer):
    """Ed25519 signer built from a 32-byte private seed."""

    def __init__(self, key: bytes) -> None:
        seed = validate_key(key, ED25519_SEED_SIZE, "ed25519 signing")
        self._key = ed25519.Ed25519PrivateKey.from_private_bytes(seed)

    def sign(self, source: ByteSource) -> bytes:
        try:
            return self._key.sign(read_all(source))
        except (ValueError, TypeError) as e:
            raise CryptoFailureError("Signing failed") from e

    @staticmethod
    def generate() -> KeyMap:
        """Generate a fresh Ed25519 keypair.

        Returns:
            The raw 32-byte seed and the raw 32-byte public key.
        """
        private_key = ed25519.Ed25519PrivateKey.generate()
        seed = private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return {ED25519_SIGNING_KEY_NAME: seed, ED25519_VERIFYING_KEY_NAME: public}


class Ed25519Verifier(Verifier):
    """Ed25519 verifier built from a 32-byte public key."""

    def __init__(self, key: bytes) -> None:
        public = validate_key(key, ED25519_PUBLIC_KEY_SIZE, "ed25519 verifying")
        # Rejects encodings that do not decompress to a curve point, and small-order points
        if not crypto_core_ed25519_is_valid_point(public):
            raise KeyFormatError("Invalid ed25519 public key encoding")
        try:
            self._key = ed25519.Ed25519PublicKey.from_public_bytes(public)
        except ValueError as e:
            raise KeyFormatError("Invalid ed25519 public key encoding") from e

    def verify(self, source: ByteSource, signature: bytes) -> bool:
        sig = truncate_signature(signature)
        data = read_all(source)
        try:
            self._key.verify(sig, data)
        except InvalidSignature:
            return False
        except (ValueError, TypeError) as e:
            raise CryptoFailureError("Signature verification failed") from e
        return True


_SIGNERS: dict[SignatureFormat, type[Signer]] = {
    SignatureFormat.BLAKE3: Blake3Signer,
    SignatureFormat.ED25519: Ed25519Signer,
}

_VERIFIERS: dict[SignatureFormat, type[Verifier]] = {
    SignatureFormat.BLAKE3: Blake3Verifier,
    SignatureFormat.ED25519: Ed25519Verifier,
}


def _lookup(table: dict, fmt: SignatureFormat) -> type:
    try:
        return table[SignatureFormat(fmt)]
    except (KeyError, ValueError):
        raise UnsupportedAlgorithmError(f"Unsupported signature format: {fmt}") from None


def create_signer(key: bytes, fmt: SignatureFormat) -> Signer:
    """Build a signer for ``fmt`` from raw key bytes.

    Args:
        key: Raw 32-byte key (BLAKE3 key or Ed25519 seed).
        fmt: The signing algorithm.

    Returns:
        A Signer instance.

    Raises:
        KeyFormatError: If the key is not exactly 32 bytes.
        UnsupportedAlgorithmError: If ``fmt`` is not a signing algorithm.
    """
    signer = _lookup(_SIGNERS, fmt)(key)
    logger.debug("Created %s signer", fmt)
    return signer


def create_verifier(key: bytes, fmt: SignatureFormat) -> Verifier:
    """Build a verifier for ``fmt`` from raw key bytes.

    Args:
        key: Raw 32-byte key (BLAKE3 key or Ed25519 public key).
        fmt: The signing algorithm.

    Returns:
        A Verifier instance.

    Raises:
        KeyFormatError: If the key is not exactly 32 bytes or is not a valid
            Ed25519 public key.
        UnsupportedAlgorithmError: If ``fmt`` is not a signing algorithm.
    """
    verifier = _lookup(_VERIFIERS, fmt)(key)
    logger.debug("Created %s verifier", fmt)
    return verifier


def generate_signing_keys(fmt: SignatureFormat) -> KeyMap:
    """Generate key material for a signing algorithm.

    Returns:
        Mapping of canonical artifact name to raw key bytes.
    """
    return _lookup(_SIGNERS, fmt).generate()


def process_sign(source: ByteSource, key: bytes, fmt: SignatureFormat) -> bytes:
    """Sign the full contents of ``source`` with ``key``."""
    return create_signer(key, fmt).sign(source)


def process_verify(
    source: ByteSource, key: bytes, signature: bytes, fmt: SignatureFormat
) -> bool:
    """Verify ``signature`` over the full contents of ``source``."""
    return create_verifier(key, fmt).verify(source, signature)
