"""The UUID value type: construction from fields, integers and bytes, and text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from uuidkit.fields import (
    check_length,
    fields_le_to_bytes,
    fields_to_bytes,
    swap_field_order,
    u64_pair_to_bytes,
    u128_le_to_bytes,
    u128_to_bytes,
)
from uuidkit.formats import Braced, Hyphenated, Simple, Urn
from uuidkit.parser import try_parse

__all__ = ["Uuid"]

_ByteSource = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True, order=True)
class Uuid:
    """A 128-bit universally unique identifier, held as 16 big-endian bytes."""

    raw: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", check_length(self.raw))

    @classmethod
    def nil(cls) -> Uuid:
        """The UUID with all 128 bits set to zero."""
        return cls(bytes(16))

    @classmethod
    def max(cls) -> Uuid:
        """The UUID with all 128 bits set to one."""
        return cls(b"\xff" * 16)

    @classmethod
    def from_fields(cls, d1: int, d2: int, d3: int, d4: _ByteSource) -> Uuid:
        """Build a UUID from its four fields in natural order."""
        return cls(fields_to_bytes(d1, d2, d3, d4))

    @classmethod
    def from_fields_le(cls, d1: int, d2: int, d3: int, d4: _ByteSource) -> Uuid:
        """Build a UUID from four fields whose first three are little-endian."""
        return cls(fields_le_to_bytes(d1, d2, d3, d4))

    @classmethod
    def from_u128(cls, v: int) -> Uuid:
        """Build a UUID from a 128-bit value."""
        return cls(u128_to_bytes(v))

    @classmethod
    def from_u128_le(cls, v: int) -> Uuid:
        """Build a UUID from a 128-bit value in little-endian order."""
        return cls(u128_le_to_bytes(v))

    @classmethod
    def from_u64_pair(cls, high_bits: int, low_bits: int) -> Uuid:
        """Build a UUID from two 64-bit halves."""
        return cls(u64_pair_to_bytes(high_bits, low_bits))

    @classmethod
    def from_slice(cls, b: _ByteSource) -> Uuid:
        """Build a UUID from exactly 16 bytes, raising a BYTE_LENGTH error otherwise."""
        return cls(check_length(b))

    @classmethod
    def from_slice_le(cls, b: _ByteSource) -> Uuid:
        """Build a UUID from 16 bytes whose first three fields are little-endian."""
        return cls(swap_field_order(b))

    @classmethod
    def from_bytes(cls, b: _ByteSource) -> Uuid:
        """Build a UUID from its 16 bytes."""
        return cls(check_length(b))

    @classmethod
    def from_bytes_le(cls, b: _ByteSource) -> Uuid:
        """Build a UUID from 16 bytes, flipping the first three fields."""
        return cls(swap_field_order(b))

    @classmethod
    def parse_str(cls, text: str | bytes | bytearray) -> Uuid:
        """Parse a simple, hyphenated, braced or URN UUID string."""
        return cls(try_parse(text))

    def as_fields(self) -> tuple[int, int, int, bytes]:
        """Return the four fields in natural order."""
        raw = self.raw
        return (
            int.from_bytes(raw[0:4], "big"),
            int.from_bytes(raw[4:6], "big"),
            int.from_bytes(raw[6:8], "big"),
            raw[8:],
        )

    def to_fields_le(self) -> tuple[int, int, int, bytes]:
        """Return the four fields with the first three read little-endian."""
        raw = self.raw
        return (
            int.from_bytes(raw[0:4], "little"),
            int.from_bytes(raw[4:6], "little"),
            int.from_bytes(raw[6:8], "little"),
            raw[8:],
        )

    def hyphenated(self) -> Hyphenated:
        """The hyphenated rendering of this UUID."""
        return Hyphenated(self)

    def simple(self) -> Simple:
        """The simple rendering of this UUID."""
        return Simple(self)

    def urn(self) -> Urn:
        """The URN rendering of this UUID."""
        return Urn(self)

    def braced(self) -> Braced:
        """The braced rendering of this UUID."""
        return Braced(self)

    def __bytes__(self) -> bytes:
        return self.raw

    def __int__(self) -> int:
        return int.from_bytes(self.raw, "big")

    def __str__(self) -> str:
        return self.hyphenated().encode_lower()

    def __format__(self, spec: str) -> str:
        return format(self.hyphenated(), spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"