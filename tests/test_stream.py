"""Tests for crypto/stream.py module."""

from __future__ import annotations

import io

import pytest

from cipherkit.crypto.constants import READ_CHUNK_SIZE
from cipherkit.crypto.stream import read_all
from cipherkit.errors import StreamReadError


class _FailingStream(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError("disk on fire")


class TestReadAll:
    """Tests for read_all."""

    def test_reads_binary_stream(self) -> None:
        """Test that a binary stream is read to EOF."""
        assert read_all(io.BytesIO(b"hello")) == b"hello"

    def test_empty_stream(self) -> None:
        """Test that an empty stream yields empty bytes."""
        assert read_all(io.BytesIO(b"")) == b""

    def test_accepts_bytes_like(self) -> None:
        """Test that bytes, bytearray and memoryview pass through as bytes."""
        assert read_all(b"abc") == b"abc"
        assert read_all(bytearray(b"abc")) == b"abc"
        assert read_all(memoryview(b"abc")) == b"abc"
        assert type(read_all(bytearray(b"abc"))) is bytes

    def test_reads_past_single_chunk(self) -> None:
        """Test that input larger than one chunk is fully buffered."""
        data = b"x" * (READ_CHUNK_SIZE * 2 + 7)
        assert read_all(io.BytesIO(data)) == data

    def test_os_error_wrapped(self) -> None:
        """Test that an OSError from the stream becomes StreamReadError."""
        with pytest.raises(StreamReadError, match="Failed to read input") as exc_info:
            read_all(_FailingStream())
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_text_stream_rejected(self) -> None:
        """Test that a text-mode stream is rejected."""
        with pytest.raises(TypeError, match="binary mode"):
            read_all(io.StringIO("hello"))  # type: ignore[arg-type]
