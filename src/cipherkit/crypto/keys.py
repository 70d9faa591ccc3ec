"""Key generation dispatch for cipherkit."""

from __future__ import annotations

import logging

from ..errors import UnsupportedAlgorithmError
from ..types import AeadFormat, AlgorithmTag, KeyMap, SignatureFormat
from .aead import generate_aead_key
from .signing import generate_signing_keys

logger = logging.getLogger("cipherkit")


def generate_keys(tag: AlgorithmTag) -> KeyMap:
    """Generate key material for any algorithm tag.

    The caller decides where and how to persist the returned bytes.

    Args:
        tag: A signing or AEAD algorithm tag.

    Returns:
        Mapping of canonical artifact name to raw key bytes.

    Raises:
        UnsupportedAlgorithmError: If the tag is reserved or unknown.
    """
    if isinstance(tag, SignatureFormat):
        keys = generate_signing_keys(tag)
    elif isinstance(tag, AeadFormat):
        keys = generate_aead_key(tag)
    else:
        raise UnsupportedAlgorithmError(f"Unknown algorithm tag: {tag!r}")
    logger.debug("Generated %s key material: %s", tag, ", ".join(sorted(keys)))
    return keys
