# uuidkit

uuidkit is a small library for 128-bit UUIDs. It has no dependencies. You
can use it to:

- parse UUIDs from text
- build UUIDs from fields, integers or raw bytes
- set the version and variant bits
- format UUIDs in the common text forms

## Installation

```
pip install uuidkit
```

## Parsing

`Uuid.parse_str` accepts four textual forms. Hex digits may be upper or
lower case.

- simple: `67e5504410b1426f9247bb680e5fe0c8`
- hyphenated: `67e55044-10b1-426f-9247-bb680e5fe0c8`
- braced: `{67e55044-10b1-426f-9247-bb680e5fe0c8}`
- URN: `urn:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8`

```python
from uuidkit.identifier import Uuid

uuid = Uuid.parse_str("F9168C5E-CEB2-4faa-B6BF-329BF39FA1E4")
print(uuid)  # f9168c5e-ceb2-4faa-b6bf-329bf39fa1e4
```

Invalid input raises `UuidError` from `uuidkit.errors`, which is a subclass
of `ValueError`. The message says what went wrong and where:

```python
from uuidkit.errors import ErrorKind, UuidError

try:
    Uuid.parse_str("F9168C5E-CEB2-4faa-BGBF-329BF39FA1E4")
except UuidError as err:
    print(err)
    # invalid character: expected an optional prefix of `urn:uuid:`
    # followed by [0-9a-fA-F-], found `G` at 21
    assert err.kind is ErrorKind.CHAR
    print(err.character, err.index)  # G 21
```

The error's `kind` is one of the following `ErrorKind` members:

- `CHAR`
- `SIMPLE_LENGTH`
- `BYTE_LENGTH`
- `GROUP_COUNT`
- `GROUP_LENGTH`
- `INVALID_UTF8`
- `OTHER`

The details for that kind are available as attributes and in `err.details`:

- `character`
- `index`
- `length`
- `count`
- `group`

The low-level parser is `uuidkit.parser.try_parse`. It takes a `str` or
bytes and returns the 16 bytes of the UUID.

`uuidkit.errors.diagnose` returns, without raising, the detailed error for
text that is already known to be invalid.

## Building

```python
from uuidkit.identifier import Uuid

Uuid.from_fields(0xA1A2A3A4, 0xB1B2, 0xC1C2, bytes([0xD1, 0xD2, 0xD3, 0xD4, 0xD5, 0xD6, 0xD7, 0xD8]))
Uuid.from_u128(0xA1A2A3A4B1B2C1C2D1D2D3D4D5D6D7D8)
Uuid.from_u64_pair(0xA1A2A3A4B1B2C1C2, 0xD1D2D3D4D5D6D7D8)
Uuid.from_slice(b"\x00" * 16)  # raises UuidError if the length is not 16
Uuid.nil()
Uuid.max()
```

Integer arguments that do not fit their field width raise `ValueError`.

The `_le` constructors take mixed-endian data, such as GUIDs stored in
little-endian order, and swap it into the standard byte order:

- `from_fields_le`
- `from_u128_le`
- `from_slice_le`
- `from_bytes_le`

To go back the other way, use `Uuid.to_fields_le()`. `Uuid.as_fields()`
returns the fields in their natural order.

A `Uuid` is immutable, hashable and ordered by its bytes. It also supports
`bytes(uuid)` and `int(uuid)`.

The byte-level helpers behind these constructors are in `uuidkit.fields`:

- `fields_to_bytes`
- `fields_le_to_bytes`
- `u128_to_bytes`
- `u128_le_to_bytes`
- `u64_pair_to_bytes`
- `swap_field_order`
- `check_length`

## Version and variant

`uuidkit.builder.Builder` sets the version and variant bits:

```python
from uuidkit.builder import Builder, Variant, Version

uuid = Builder.from_random_bytes(bytes(range(16))).into_uuid()

builder = Builder.nil()
builder.set_variant(Variant.RFC4122).set_version(Version.SHA1)
print(builder.as_uuid())
```

The methods differ in whether they change the builder:

- `with_variant` and `with_version` return a new builder.
- `set_variant` and `set_version` change the builder in place.

The `Variant` members are:

- `NCS`
- `RFC4122`
- `MICROSOFT`
- `FUTURE`

The `Version` members are:

- `NIL`
- `MAC`
- `DCE`
- `MD5`
- `RANDOM`
- `SHA1`
- `SORT_MAC`
- `SORT_RAND`
- `CUSTOM`

`from_md5_bytes`, `from_sha1_bytes` and `from_custom_bytes` mark hashed or
user-defined bytes as version 3, 5 or 8 UUIDs.

The builder only sets bits in bytes you supply. It does not hash names,
read clocks or draw random numbers. Bring your own bytes from `hashlib`,
`os.urandom` or similar.

## Formatting

```python
uuid.hyphenated().encode_upper()  # "F9168C5E-CEB2-4FAA-B6BF-329BF39FA1E4"
uuid.simple().encode_lower()      # "f9168c5eceb24faab6bf329bf39fa1e4"
str(uuid.urn())                   # "urn:uuid:f9168c5e-ceb2-4faa-b6bf-329bf39fa1e4"
f"{uuid.braced():X}"              # "{F9168C5E-CEB2-4FAA-B6BF-329BF39FA1E4}"
```

The adapters `Hyphenated`, `Simple`, `Urn` and `Braced` in
`uuidkit.formats` wrap a `Uuid`. Each can be created with `from_uuid` and
turned back with `into_uuid`. Each has a `LENGTH` of 36, 32, 45 and 38
respectively.

Each adapter supports these format specs:

- `x` renders lower case.
- `X` renders upper case.
- Any other spec is applied to the lower-case string.