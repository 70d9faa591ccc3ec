"""Base64 encoding/decoding utilities for cipherkit."""

from __future__ import annotations

import base64
import binascii
import re

from ..errors import Base64DecodeError
from ..types import Base64Format

_BASE64URL_PATTERN = re.compile(r"^[A-Za-z0-9_-]*={0,2}$")
_BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")


def _pad(s: str) -> str:
    padding = 4 - (len(s) % 4)
    if padding != 4:
        s += "=" * padding
    return s


def to_base64url(data: bytes) -> str:
    """Encode bytes to URL-safe base64 without padding.

    Args:
        data: The bytes to encode.

    Returns:
        URL-safe base64 string without padding.
    """
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def from_base64url(s: str) -> bytes:
    """Decode URL-safe base64 string to bytes.

    Handles missing padding automatically. Surrounding whitespace is ignored.

    Args:
        s: The base64url string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base64DecodeError: If the string contains characters outside the
            URL-safe alphabet or has an impossible length.
    """
    s = s.strip()
    if not _BASE64URL_PATTERN.match(s):
        raise Base64DecodeError("Invalid base64url: contains non-Base64URL characters")
    try:
        return base64.urlsafe_b64decode(_pad(s.rstrip("=")))
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(f"Invalid base64url: {e}") from e


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str) -> bytes:
    """Decode standard base64 string to bytes.

    Args:
        s: The base64 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base64DecodeError: If the string is not valid standard base64.
    """
    s = s.strip()
    if not _BASE64_PATTERN.match(s):
        raise Base64DecodeError("Invalid base64: contains non-Base64 characters")
    try:
        return base64.b64decode(_pad(s.rstrip("=")), validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(f"Invalid base64: {e}") from e


def encode_base64(data: bytes, fmt: Base64Format) -> str:
    """Encode bytes with the alphabet named by ``fmt``."""
    if Base64Format(fmt) is Base64Format.URLSAFE:
        return to_base64url(data)
    return to_base64(data)


def decode_base64(s: str, fmt: Base64Format) -> bytes:
    """Decode text with the alphabet named by ``fmt``."""
    if Base64Format(fmt) is Base64Format.URLSAFE:
        return from_base64url(s)
    return from_base64(s)
