"""Cryptographic operations for cipherkit."""

from .aead import (
    ChaCha20Poly1305Cipher,
    Decryptor,
    Encryptor,
    create_decryptor,
    create_encryptor,
    generate_aead_key,
    process_decrypt,
    process_encrypt,
)
from .constants import CHACHA_NONCE_SIZE, CHACHA_TAG_SIZE, KEY_SIZE
from .keys import generate_keys
from .signing import (
    Blake3Signer,
    Blake3Verifier,
    Ed25519Signer,
    Ed25519Verifier,
    Signer,
    Verifier,
    create_signer,
    create_verifier,
    generate_signing_keys,
    process_sign,
    process_verify,
)
from .stream import read_all
from .utils import (
    decode_base64,
    encode_base64,
    from_base64,
    from_base64url,
    to_base64,
    to_base64url,
)

__all__ = [
    "CHACHA_NONCE_SIZE",
    "CHACHA_TAG_SIZE",
    "KEY_SIZE",
    "Blake3Signer",
    "Blake3Verifier",
    "ChaCha20Poly1305Cipher",
    "Decryptor",
    "Ed25519Signer",
    "Ed25519Verifier",
    "Encryptor",
    "Signer",
    "Verifier",
    "create_decryptor",
    "create_encryptor",
    "create_signer",
    "create_verifier",
    "decode_base64",
    "encode_base64",
    "from_base64",
    "from_base64url",
    "generate_aead_key",
    "generate_keys",
    "generate_signing_keys",
    "process_decrypt",
    "process_encrypt",
    "process_sign",
    "process_verify",
    "read_all",
    "to_base64",
    "to_base64url",
]
