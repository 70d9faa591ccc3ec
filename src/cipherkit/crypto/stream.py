"""Full-buffering input adapter shared by all cipherkit operations."""

from __future__ import annotations

import logging

from ..errors import StreamReadError
from ..types import ByteSource
from .constants import READ_CHUNK_SIZE

logger = logging.getLogger("cipherkit")


def read_all(source: ByteSource) -> bytes:
    """Read a byte source to completion.

    No cryptographic work starts until the whole input is in memory, so
    input size is bounded by available memory.

    Args:
        source: A readable binary stream, or a bytes-like value.

    Returns:
        The complete input as bytes.

    Raises:
        StreamReadError: If the stream raises an OSError while reading.
        TypeError: If the stream yields text instead of bytes.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    chunks: list[bytes] = []
    try:
        while True:
            chunk = source.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            if isinstance(chunk, str):
                raise TypeError("Input stream must be opened in binary mode")
            chunks.append(chunk)
    except OSError as e:
        raise StreamReadError(f"Failed to read input: {e}") from e

    data = b"".join(chunks)
    logger.debug("Buffered %d bytes of input", len(data))
    return data
