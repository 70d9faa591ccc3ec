"""Cryptographic constants for cipherkit."""

# Every implemented algorithm takes a 32-byte key
KEY_SIZE = 32

# BLAKE3 keyed hash
BLAKE3_KEY_SIZE = 32
BLAKE3_OUTPUT_SIZE = 32

# Ed25519
ED25519_SEED_SIZE = 32
ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

# ChaCha20-Poly1305 family
CHACHA_KEY_SIZE = 32
CHACHA_NONCE_SIZE = 12
CHACHA_TAG_SIZE = 16

# Canonical key artifact names returned by the generators
BLAKE3_KEY_NAME = "blake3.key"
ED25519_SIGNING_KEY_NAME = "ed25519.sk"
ED25519_VERIFYING_KEY_NAME = "ed25519.vk"
CHACHA20POLY1305_KEY_NAME = "chacha20poly1305.key"

# Chunk size used when buffering input streams
READ_CHUNK_SIZE = 64 * 1024
