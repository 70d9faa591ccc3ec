"""Error hierarchy for cipherkit."""

from __future__ import annotations


class CipherKitError(Exception):
    """Base exception for all cipherkit errors."""

    pass


class KeyFormatError(CipherKitError):
    """Key material has the wrong size or an invalid encoding."""

    pass


class UnsupportedAlgorithmError(CipherKitError):
    """Algorithm is declared but not implemented."""

    pass


class CryptoFailureError(CipherKitError):
    """Cryptographic operation failure.

    Raised for AEAD seal/open failures and unexpected errors from the
    signature library. The message never says which check failed.
    """

    pass


class StreamReadError(CipherKitError):
    """Reading the caller-supplied input stream failed."""

    pass


class Base64DecodeError(CipherKitError):
    """Wire text is not valid base64 for the requested alphabet."""

    pass


class ConfigError(CipherKitError):
    """Invalid configuration value."""

    pass
