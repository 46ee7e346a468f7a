"""A single PNG chunk: length, type, data and CRC."""

from __future__ import annotations

import zlib

from .chunk_type import ChunkType

__all__ = ["Chunk", "ChunkError", "calculate_crc"]

_FIELD = 4


class ChunkError(ValueError):
    """Raised when bytes do not form a valid chunk."""


def calculate_crc(chunk_type: ChunkType, data: bytes) -> int:
    """CRC-32 over the chunk type followed by the data."""
    return zlib.crc32(bytes(chunk_type) + bytes(data)) & 0xFFFFFFFF


def _pretty_bytes(data: bytes) -> str:
    if not data:
        return "[]"
    return "[\n" + "".join(f"    {b},\n" for b in data) + "]"


class Chunk:
    """A PNG chunk holding its type, payload and checksum."""

    __slots__ = ("_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type: ChunkType, data: bytes) -> None:
        self._chunk_type = chunk_type
        self._data = bytes(data)
        self._crc = calculate_crc(chunk_type, self._data)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Chunk":
        """Parse a chunk, checking that its stored CRC is correct."""
        raw = bytes(raw)
        if len(raw) < 2 * _FIELD:
            raise ChunkError("The array provided does not have enough data")
        length = int.from_bytes(raw[:_FIELD], "big")
        chunk_type = ChunkType(raw[_FIELD : 2 * _FIELD])
        data_end = 2 * _FIELD + length
        crc_end = data_end + _FIELD
        if len(raw) < crc_end:
            raise ChunkError("The array provided does not have enough data")
        data = raw[2 * _FIELD : data_end]
        crc = int.from_bytes(raw[data_end:crc_end], "big")
        if crc != calculate_crc(chunk_type, data):
            raise ChunkError(
                "The CRC provided is not correct in relation to the other chunks"
            )
        return cls(chunk_type, data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def crc(self) -> int:
        return self._crc

    def data_as_string(self) -> str:
        """The payload decoded as UTF-8."""
        try:
            return self._data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ChunkError(f"chunk data is not valid UTF-8: {exc}") from exc

    def __bytes__(self) -> bytes:
        return b"".join(
            (
                self.length.to_bytes(_FIELD, "big"),
                bytes(self._chunk_type),
                self._data,
                self._crc.to_bytes(_FIELD, "big"),
            )
        )

    def __str__(self) -> str:
        return (
            f"Length: {self.length}\n"
            f"Chunk type: {self._chunk_type}\n"
            f"Data: {_pretty_bytes(self._data)}\n"
            f"CRC: {self._crc}"
        )

    def __repr__(self) -> str:
        return (
            f"Chunk(length={self.length}, chunk_type={self._chunk_type!r}, "
            f"data={self._data!r}, crc={self._crc})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._chunk_type == other._chunk_type and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._chunk_type, self._data))