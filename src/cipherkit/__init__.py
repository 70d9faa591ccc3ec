"""cipherkit - signing, verification and authenticated encryption over byte streams.

Example:
    ```python
    from cipherkit import SignatureFormat, generate_keys, process_sign, process_verify

    keys = generate_keys(SignatureFormat.ED25519)
    sig = process_sign(b"hello", keys["ed25519.sk"], SignatureFormat.ED25519)
    assert process_verify(b"hello", keys["ed25519.vk"], sig, SignatureFormat.ED25519)
    ```
"""

from .config import CipherKitConfig, load_config
from .crypto import (
    Decryptor,
    Encryptor,
    Signer,
    Verifier,
    create_decryptor,
    create_encryptor,
    create_signer,
    create_verifier,
    generate_aead_key,
    generate_keys,
    generate_signing_keys,
    process_decrypt,
    process_encrypt,
    process_sign,
    process_verify,
    read_all,
)
from .errors import (
    Base64DecodeError,
    CipherKitError,
    ConfigError,
    CryptoFailureError,
    KeyFormatError,
    StreamReadError,
    UnsupportedAlgorithmError,
)
from .types import AeadFormat, AlgorithmTag, Base64Format, EncryptResult, KeyMap, SignatureFormat

__version__ = "0.1.0"

__all__ = [
    "AeadFormat",
    "AlgorithmTag",
    "Base64DecodeError",
    "Base64Format",
    "CipherKitConfig",
    "CipherKitError",
    "ConfigError",
    "CryptoFailureError",
    "Decryptor",
    "EncryptResult",
    "Encryptor",
    "KeyFormatError",
    "KeyMap",
    "SignatureFormat",
    "Signer",
    "StreamReadError",
    "UnsupportedAlgorithmError",
    "Verifier",
    "create_decryptor",
    "create_encryptor",
    "create_signer",
    "create_verifier",
    "generate_aead_key",
    "generate_keys",
    "generate_signing_keys",
    "load_config",
    "process_decrypt",
    "process_encrypt",
    "process_sign",
    "process_verify",
    "read_all",
]
