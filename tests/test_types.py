"""Tests for types module."""

from __future__ import annotations

import pytest

from cipherkit.types import AeadFormat, Base64Format, EncryptResult, SignatureFormat


class TestFormatTags:
    """Tests for algorithm tag values."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("blake3", SignatureFormat.BLAKE3),
            ("ed25519", SignatureFormat.ED25519),
        ],
    )
    def test_signature_format(self, text: str, expected: SignatureFormat) -> None:
        """Test lookup of signing tags by wire name."""
        assert SignatureFormat(text) is expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("chacha20poly1305", AeadFormat.CHACHA20_POLY1305),
            ("xchacha20poly1305", AeadFormat.XCHACHA20_POLY1305),
            ("chacha12poly1305", AeadFormat.CHACHA12_POLY1305),
            ("chacha8poly1305", AeadFormat.CHACHA8_POLY1305),
        ],
    )
    def test_aead_format(self, text: str, expected: AeadFormat) -> None:
        """Test that all four AEAD tags, including reserved ones, exist."""
        assert AeadFormat(text) is expected

    def test_base64_format(self) -> None:
        """Test base64 alphabet lookup."""
        assert Base64Format("urlsafe") is Base64Format.URLSAFE
        assert Base64Format("standard") is Base64Format.STANDARD

    def test_invalid_format(self) -> None:
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError):
            SignatureFormat("rsa")

    def test_families_do_not_overlap(self) -> None:
        """Test that an AEAD name is not a signing tag."""
        with pytest.raises(ValueError):
            SignatureFormat("chacha20poly1305")

    def test_str_is_value(self) -> None:
        """Test that tags display as their wire names."""
        assert str(SignatureFormat.ED25519) == "ed25519"
        assert f"{AeadFormat.CHACHA20_POLY1305}" == "chacha20poly1305"


class TestEncryptResult:
    """Tests for EncryptResult."""

    def test_unpacking(self) -> None:
        """Test tuple-style unpacking."""
        ciphertext, nonce = EncryptResult(ciphertext=b"ct", nonce=b"n" * 12)
        assert ciphertext == b"ct"
        assert nonce == b"n" * 12

    def test_frozen(self) -> None:
        """Test that results are immutable."""
        result = EncryptResult(ciphertext=b"ct", nonce=b"n")
        with pytest.raises(AttributeError):
            result.nonce = b"other"  # type: ignore[misc]
