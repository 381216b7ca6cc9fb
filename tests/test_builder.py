import pytest
from hypothesis import given
from hypothesis import strategies as st

from uuidkit.builder import Builder, Variant, Version
from uuidkit.errors import ErrorKind, UuidError
from uuidkit.identifier import Uuid

BYTES = bytes(
    [0xA1, 0xA2, 0xA3, 0xA4, 0xB1, 0xB2, 0xC1, 0xC2,
     0xD1, 0xD2, 0xD3, 0xD4, 0xD5, 0xD6, 0xD7, 0xD8]
)
RANDOM = bytes([70, 235, 208, 238, 14, 109, 67, 201, 185, 13, 204, 195, 90, 145, 63, 62])
D4 = bytes([0xD1, 0xD2, 0xD3, 0xD4, 0xD5, 0xD6, 0xD7, 0xD8])


def version_of(uuid):
    return uuid.raw[6] >> 4


def test_from_random_bytes():
    uuid = Builder.from_random_bytes(RANDOM).into_uuid()
    assert version_of(uuid) == Version.RANDOM
    assert uuid.raw[8] & 0xC0 == 0x80
    assert str(uuid) == "46ebd0ee-0e6d-43c9-b90d-ccc35a913f3e"


def test_from_bytes():
    assert str(Builder.from_bytes(BYTES).into_uuid()) == "a1a2a3a4-b1b2-c1c2-d1d2-d3d4d5d6d7d8"


def test_from_bytes_le():
    assert str(Builder.from_bytes_le(BYTES).into_uuid()) == "a4a3a2a1-b2b1-c2c1-d1d2-d3d4d5d6d7d8"


def test_from_slice():
    assert str(Builder.from_slice(BYTES).into_uuid()) == "a1a2a3a4-b1b2-c1c2-d1d2-d3d4d5d6d7d8"


def test_from_slice_le():
    assert str(Builder.from_slice_le(BYTES).into_uuid()) == "a4a3a2a1-b2b1-c2c1-d1d2-d3d4d5d6d7d8"


def test_from_slice_wrong_length():
    with pytest.raises(UuidError) as info:
        Builder.from_slice(BYTES[:15])
    assert info.value.kind is ErrorKind.BYTE_LENGTH
    assert info.value.length == 15


def test_from_fields():
    builder = Builder.from_fields(0xA1A2A3A4, 0xB1B2, 0xC1C2, D4)
    assert str(builder.into_uuid()) == "a1a2a3a4-b1b2-c1c2-d1d2-d3d4d5d6d7d8"


def test_from_fields_le():
    builder = Builder.from_fields_le(0xA1A2A3A4, 0xB1B2, 0xC1C2, D4)
    assert str(builder.into_uuid()) == "a4a3a2a1-b2b1-c2c1-d1d2-d3d4d5d6d7d8"


def test_from_u128():
    builder = Builder.from_u128(0xA1A2A3A4B1B2C1C2D1D2D3D4D5D6D7D8)
    assert str(builder.into_uuid()) == "a1a2a3a4-b1b2-c1c2-d1d2-d3d4d5d6d7d8"


def test_from_u128_le():
    builder = Builder.from_u128_le(0xA1A2A3A4B1B2C1C2D1D2D3D4D5D6D7D8)
    assert str(builder.into_uuid()) == "d8d7d6d5-d4d3-d2d1-c2c1-b2b1a4a3a2a1"


def test_nil():
    assert str(Builder.nil().into_uuid()) == "00000000-0000-0000-0000-000000000000"


def test_as_uuid_is_stable():
    builder = Builder.nil()
    first = builder.as_uuid()
    second = builder.as_uuid()
    assert str(first) == "00000000-0000-0000-0000-000000000000"
    assert first == second
    assert first == Uuid.nil()


@pytest.mark.parametrize(
    "factory, version",
    [
        (Builder.from_md5_bytes, Version.MD5),
        (Builder.from_random_bytes, Version.RANDOM),
        (Builder.from_sha1_bytes, Version.SHA1),
        (Builder.from_custom_bytes, Version.CUSTOM),
    ],
)
def test_versioned_constructors(factory, version):
    uuid = factory(b"\xff" * 16).into_uuid()
    assert version_of(uuid) == version
    assert uuid.raw[6] & 0x0F == 0x0F
    assert uuid.raw[8] == 0xBF


@pytest.mark.parametrize(
    "variant, start, expected",
    [
        (Variant.NCS, 0xFF, 0x7F),
        (Variant.RFC4122, 0xFF, 0xBF),
        (Variant.MICROSOFT, 0xFF, 0xDF),
        (Variant.FUTURE, 0x00, 0xE0),
        (Variant.NCS, 0x00, 0x00),
        (Variant.RFC4122, 0x00, 0x80),
        (Variant.MICROSOFT, 0x00, 0xC0),
    ],
)
def test_with_variant_bits(variant, start, expected):
    raw = bytearray(16)
    raw[8] = start
    uuid = Builder.from_bytes(raw).with_variant(variant).into_uuid()
    assert uuid.raw[8] == expected


def test_with_variant_leaves_original():
    builder = Builder.nil()
    other = builder.with_variant(Variant.FUTURE)
    assert builder.as_uuid() == Uuid.nil()
    assert other.as_uuid().raw[8] == 0xE0


def test_set_variant_mutates_and_returns_self():
    builder = Builder.nil()
    assert builder.set_variant(Variant.RFC4122) is builder
    assert builder.as_uuid().raw[8] == 0x80


def test_set_version_mutates_and_returns_self():
    builder = Builder.nil()
    assert builder.set_version(Version.SORT_RAND) is builder
    assert builder.as_uuid().raw[6] == 0x70


def test_with_version_accepts_int():
    assert Builder.nil().with_version(4).as_uuid().raw[6] == 0x40


def test_invalid_version_rejected():
    with pytest.raises(ValueError):
        Builder.nil().with_version(0x10)


@pytest.mark.parametrize(
    "variant, expected",
    [
        (Variant.NCS, "NCS"),
        (Variant.RFC4122, "RFC4122"),
        (Variant.MICROSOFT, "Microsoft"),
        (Variant.FUTURE, "Future"),
    ],
)
def test_variant_str(variant, expected):
    assert variant.__str__() == expected
    assert f"{variant}" == expected


def test_builder_requires_uuid():
    with pytest.raises(TypeError):
        Builder(BYTES)


def test_equality():
    assert Builder.from_bytes(BYTES) == Builder(Uuid.from_bytes(BYTES))


@given(st.binary(min_size=16, max_size=16), st.sampled_from(list(Version)))
def test_version_only_changes_nibble(data, version):
    uuid = Builder.from_bytes(data).with_version(version).into_uuid()
    assert version_of(uuid) == version
    assert uuid.raw[6] & 0x0F == data[6] & 0x0F
    assert uuid.raw[:6] == data[:6] and uuid.raw[7:] == data[7:]


@given(st.binary(min_size=16, max_size=16), st.sampled_from(list(Variant)))
def test_variant_idempotent(data, variant):
    once = Builder.from_bytes(data).with_variant(variant)
    twice = once.with_variant(variant)
    assert once == twice
    assert once.as_uuid().raw[:8] == data[:8]
    assert once.as_uuid().raw[9:] == data[9:]