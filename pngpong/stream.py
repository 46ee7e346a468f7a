"""Reading and writing the byte stream of a PNG file."""

from __future__ import annotations

from typing import Iterable, List

from .chunk import Chunk, ChunkError
from .chunk_type import ChunkTypeError

__all__ = ["PNG_SIGNATURE", "PngError", "check_header", "read_chunks", "write_png"]

PNG_SIGNATURE = bytes((137, 80, 78, 71, 13, 10, 26, 10))

_LENGTH_FIELD = 4
_TYPE_AND_CRC = 8


class PngError(ValueError):
    """Raised when bytes do not form a valid PNG stream."""


def check_header(raw: bytes) -> bytes:
    """Check the PNG signature and return the bytes that follow it."""
    raw = bytes(raw)
    if len(raw) < len(PNG_SIGNATURE):
        raise PngError("not enough data for a PNG header")
    if raw[: len(PNG_SIGNATURE)] != PNG_SIGNATURE:
        raise PngError("Header of file is not in the standard format")
    return raw[len(PNG_SIGNATURE) :]


def read_chunks(raw: bytes) -> List[Chunk]:
    """Parse a whole PNG file into its chunks.

    Fewer than four bytes left over after the last chunk are ignored.
    """
    body = check_header(raw)
    chunks: List[Chunk] = []
    offset = 0
    while len(body) - offset >= _LENGTH_FIELD:
        length = int.from_bytes(body[offset : offset + _LENGTH_FIELD], "big")
        end = offset + _LENGTH_FIELD + length + _TYPE_AND_CRC
        if end > len(body):
            raise PngError("chunk runs past the end of the data")
        try:
            chunks.append(Chunk.from_bytes(body[offset:end]))
        except (ChunkError, ChunkTypeError) as exc:
            raise PngError(f"invalid chunk at offset {offset + len(PNG_SIGNATURE)}: {exc}") from exc
        offset = end
    return chunks


def write_png(chunks: Iterable[Chunk]) -> bytes:
    """Serialise chunks behind the standard PNG signature."""
    return PNG_SIGNATURE + b"".join(bytes(chunk) for chunk in chunks)