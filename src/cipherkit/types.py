"""Type definitions for cipherkit."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Union


class _Format(str, Enum):
    """Base for algorithm tags; members display as their wire names."""

    def __str__(self) -> str:
        return self.value


class SignatureFormat(_Format):
    """Signing algorithm tags."""

    BLAKE3 = "blake3"
    ED25519 = "ed25519"


class AeadFormat(_Format):
    """AEAD algorithm tags.

    Only CHACHA20_POLY1305 is implemented; the other members are reserved.
    """

    CHACHA20_POLY1305 = "chacha20poly1305"
    XCHACHA20_POLY1305 = "xchacha20poly1305"
    CHACHA12_POLY1305 = "chacha12poly1305"
    CHACHA8_POLY1305 = "chacha8poly1305"


class Base64Format(_Format):
    """Base64 alphabets for wire encoding."""

    STANDARD = "standard"
    URLSAFE = "urlsafe"


AlgorithmTag = Union[SignatureFormat, AeadFormat]

# Anything the stream processor can buffer
ByteSource = Union[BinaryIO, bytes, bytearray, memoryview]

# Canonical artifact name -> raw key bytes
KeyMap = dict[str, bytes]


@dataclass(frozen=True)
class EncryptResult:
    """Output of an AEAD encryption.

    Attributes:
        ciphertext: Ciphertext with the 16-byte authentication tag appended.
        nonce: The 12-byte nonce drawn for this encryption.
    """

    ciphertext: bytes
    nonce: bytes

    def __iter__(self) -> Iterator[bytes]:
        yield self.ciphertext
        yield self.nonce
