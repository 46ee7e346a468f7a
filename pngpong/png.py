"""An in-memory PNG file as an ordered list of chunks."""

from __future__ import annotations

import textwrap
from typing import Iterable, Iterator, List, Optional, Tuple

from .chunk import Chunk
from .chunk_type import ChunkType, ChunkTypeError
from .stream import PNG_SIGNATURE, PngError, read_chunks, write_png

__all__ = ["Png"]


class Png:
    """A PNG file: the standard signature followed by its chunks."""

    __slots__ = ("_chunks",)

    def __init__(self, chunks: Iterable[Chunk] = ()) -> None:
        self._chunks: List[Chunk] = list(chunks)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Png":
        """Parse a complete PNG file, checking its signature and every CRC."""
        return cls(read_chunks(raw))

    @property
    def header(self) -> bytes:
        return PNG_SIGNATURE

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def remove_first_chunk(self, chunk_type: str) -> Chunk:
        """Remove and return the first chunk of the named type."""
        wanted = ChunkType.from_str(chunk_type)
        for index, chunk in enumerate(self._chunks):
            if chunk.chunk_type == wanted:
                return self._chunks.pop(index)
        raise PngError("Could not find specified chunk")

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        """The first chunk of the named type, or None if there is none."""
        try:
            wanted = ChunkType.from_str(chunk_type)
        except ChunkTypeError:
            return None
        return next((c for c in self._chunks if c.chunk_type == wanted), None)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __bytes__(self) -> bytes:
        return write_png(self._chunks)

    def __str__(self) -> str:
        if not self._chunks:
            return "[]"
        body = "".join(
            textwrap.indent(str(chunk), "    ") + ",\n" for chunk in self._chunks
        )
        return "[\n" + body + "]"

    def __repr__(self) -> str:
        return f"Png(chunks={self._chunks!r})"