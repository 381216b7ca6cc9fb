"""A builder for UUIDs, with control over the version and variant bits."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum
from typing import Union

from uuidkit.identifier import Uuid

__all__ = ["Variant", "Version", "Builder"]

_ByteSource = Union[bytes, bytearray, memoryview, Iterable[int]]


class Variant(Enum):
    """The layout a UUID follows, encoded in the top bits of byte 8."""

    NCS = "NCS"
    RFC4122 = "RFC4122"
    MICROSOFT = "Microsoft"
    FUTURE = "Future"

    def __str__(self) -> str:
        return self.value


class Version(IntEnum):
    """The version number of a UUID, encoded in the top nibble of byte 6."""

    NIL = 0
    MAC = 1
    DCE = 2
    MD5 = 3
    RANDOM = 4
    SHA1 = 5
    SORT_MAC = 6
    SORT_RAND = 7
    CUSTOM = 8


# (bits kept from byte 8, bits forced on)
_VARIANT_BITS: dict[Variant, tuple[int, int]] = {
    Variant.NCS: (0x7F, 0x00),
    Variant.RFC4122: (0x3F, 0x80),
    Variant.MICROSOFT: (0x1F, 0xC0),
    Variant.FUTURE: (0xFF, 0xE0),
}


class Builder:
    """Builds a :class:`Uuid`, allowing its version and variant to be set."""

    __slots__ = ("_uuid",)

    def __init__(self, uuid: Uuid) -> None:
        if not isinstance(uuid, Uuid):
            raise TypeError(f"expected a Uuid, got {type(uuid).__name__}")
        self._uuid = uuid

    @classmethod
    def from_bytes(cls, b: _ByteSource) -> Builder:
        """Start from the 16 bytes of a UUID."""
        return cls(Uuid.from_bytes(b))

    @classmethod
    def from_bytes_le(cls, b: _ByteSource) -> Builder:
        """Start from 16 bytes whose first three fields are little-endian."""
        return cls(Uuid.from_bytes_le(b))

    @classmethod
    def from_md5_bytes(cls, md5_bytes: _ByteSource) -> Builder:
        """Start a version 3 UUID from MD5 hash bytes."""
        return (
            cls.from_bytes(md5_bytes).with_variant(Variant.RFC4122).with_version(Version.MD5)
        )

    @classmethod
    def from_random_bytes(cls, random_bytes: _ByteSource) -> Builder:
        """Start a version 4 UUID from random bytes."""
        return (
            cls.from_bytes(random_bytes)
            .with_variant(Variant.RFC4122)
            .with_version(Version.RANDOM)
        )

    @classmethod
    def from_sha1_bytes(cls, sha1_bytes: _ByteSource) -> Builder:
        """Start a version 5 UUID from SHA-1 hash bytes."""
        return (
            cls.from_bytes(sha1_bytes).with_variant(Variant.RFC4122).with_version(Version.SHA1)
        )

    @classmethod
    def from_custom_bytes(cls, custom_bytes: _ByteSource) -> Builder:
        """Start a version 8 UUID from user-defined bytes."""
        return (
            cls.from_bytes(custom_bytes)
            .with_variant(Variant.RFC4122)
            .with_version(Version.CUSTOM)
        )

    @classmethod
    def from_slice(cls, b: _ByteSource) -> Builder:
        """Start from exactly 16 bytes, raising a BYTE_LENGTH error otherwise."""
        return cls(Uuid.from_slice(b))

    @classmethod
    def from_slice_le(cls, b: _ByteSource) -> Builder:
        """Start from exactly 16 bytes whose first three fields are little-endian."""
        return cls(Uuid.from_slice_le(b))

    @classmethod
    def from_fields(cls, d1: int, d2: int, d3: int, d4: _ByteSource) -> Builder:
        """Start from the four UUID fields in natural order."""
        return cls(Uuid.from_fields(d1, d2, d3, d4))

    @classmethod
    def from_fields_le(cls, d1: int, d2: int, d3: int, d4: _ByteSource) -> Builder:
        """Start from four fields whose first three are little-endian."""
        return cls(Uuid.from_fields_le(d1, d2, d3, d4))

    @classmethod
    def from_u128(cls, v: int) -> Builder:
        """Start from a 128-bit value."""
        return cls(Uuid.from_u128(v))

    @classmethod
    def from_u128_le(cls, v: int) -> Builder:
        """Start from a 128-bit value in little-endian order."""
        return cls(Uuid.from_u128_le(v))

    @classmethod
    def nil(cls) -> Builder:
        """Start from the nil UUID."""
        return cls(Uuid.nil())

    def with_variant(self, v: Variant | str) -> Builder:
        """Return a new builder with the variant bits set to ``v``."""
        keep, force = _VARIANT_BITS[Variant(v)]
        raw = bytearray(self._uuid.raw)
        raw[8] = (raw[8] & keep) | force
        return Builder(Uuid(bytes(raw)))

    def set_variant(self, v: Variant | str) -> Builder:
        """Set the variant bits in place and return this builder."""
        self._uuid = self.with_variant(v)._uuid
        return self

    def with_version(self, v: Version | int) -> Builder:
        """Return a new builder with the version nibble set to ``v``."""
        version = Version(v)
        raw = bytearray(self._uuid.raw)
        raw[6] = (raw[6] & 0x0F) | ((version << 4) & 0xFF)
        return Builder(Uuid(bytes(raw)))

    def set_version(self, v: Version | int) -> Builder:
        """Set the version nibble in place and return this builder."""
        self._uuid = self.with_version(v)._uuid
        return self

    def as_uuid(self) -> Uuid:
        """The UUID built so far."""
        return self._uuid

    def into_uuid(self) -> Uuid:
        """Finish building and return the UUID."""
        return self._uuid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Builder):
            return NotImplemented
        return self._uuid == other._uuid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._uuid!r})"