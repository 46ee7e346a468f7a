"""The actions behind each command: encode, decode, remove and print."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .chunk import Chunk
from .chunk_type import ChunkType
from .png import Png
from .stream import PngError

__all__ = ["encode", "decode", "remove", "print_png"]

PathLike = Union[str, "os.PathLike[str]"]


def _load(path: PathLike) -> Png:
    return Png.from_bytes(Path(path).read_bytes())


def encode(
    path: PathLike,
    chunk_type: str,
    message: str,
    output_path: Optional[PathLike] = None,
) -> None:
    """Append a chunk holding the message; write to output_path or back to path."""
    png = _load(path)
    png.append_chunk(Chunk(ChunkType.from_str(chunk_type), message.encode("utf-8")))
    target = Path(output_path) if output_path is not None else Path(path)
    target.write_bytes(bytes(png))


def decode(path: PathLike, chunk_type: str) -> str:
    """Print and return the message in the first chunk of the given type."""
    chunk = _load(path).chunk_by_type(chunk_type)
    if chunk is None:
        raise PngError("no chunk of the specified type found")
    message = chunk.data_as_string()
    print(message)
    return message


def remove(path: PathLike, chunk_type: str) -> Chunk:
    """Remove the first chunk of the given type from the file in place."""
    png = _load(path)
    removed = png.remove_first_chunk(chunk_type)
    Path(path).write_bytes(bytes(png))
    return removed


def print_png(path: PathLike) -> str:
    """Print and return a readable listing of the file's chunks."""
    text = str(_load(path))
    print(text)
    return text