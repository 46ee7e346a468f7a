"""The four-letter type code that names every PNG chunk."""

from __future__ import annotations

from typing import Iterable, Union

__all__ = ["ChunkType", "ChunkTypeError"]

_TYPE_LENGTH = 4
_PROPERTY_BIT = 5


class ChunkTypeError(ValueError):
    """Raised when bytes or text cannot form a chunk type."""


def _is_letter(byte: int) -> bool:
    return 65 <= byte <= 90 or 97 <= byte <= 122


def _property_bit(byte: int) -> int:
    return (byte >> _PROPERTY_BIT) & 1


class ChunkType:
    """A chunk type code made of four ASCII letters."""

    __slots__ = ("_raw",)

    def __init__(self, raw: Union[bytes, bytearray, Iterable[int]]) -> None:
        raw = bytes(raw)
        if len(raw) != _TYPE_LENGTH:
            raise ChunkTypeError(
                f"chunk type needs exactly {_TYPE_LENGTH} bytes, got {len(raw)}"
            )
        if not all(_is_letter(b) for b in raw):
            raise ChunkTypeError(
                "provided character's byte is not in the correct range"
            )
        self._raw = raw

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        """Build a chunk type from a four-character ASCII name."""
        encoded = text.encode("utf-8")
        if len(encoded) != _TYPE_LENGTH or not encoded.isascii():
            raise ChunkTypeError(
                f'chunk name needs to be of length {_TYPE_LENGTH}, '
                f'length of name "{text}" provided: {len(encoded)}'
            )
        return cls(encoded)

    def is_critical(self) -> bool:
        return _property_bit(self._raw[0]) == 0

    def is_public(self) -> bool:
        return _property_bit(self._raw[1]) == 0

    def is_reserved_bit_valid(self) -> bool:
        return _property_bit(self._raw[2]) == 0

    def is_safe_to_copy(self) -> bool:
        return _property_bit(self._raw[3]) == 1

    def is_valid(self) -> bool:
        """True when every byte is a letter and the reserved bit is clear."""
        return all(_is_letter(b) for b in self._raw) and self.is_reserved_bit_valid()

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return self._raw.decode("ascii")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)