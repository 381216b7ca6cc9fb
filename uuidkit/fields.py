"""Conversions between UUID field values and the 16 big-endian bytes of a UUID."""

from __future__ import annotations

from collections.abc import Iterable

from uuidkit.errors import ErrorKind, UuidError

__all__ = [
    "fields_to_bytes",
    "fields_le_to_bytes",
    "u128_to_bytes",
    "u128_le_to_bytes",
    "u64_pair_to_bytes",
    "swap_field_order",
    "check_length",
]


def _check_unsigned(name: str, value: int, bits: int) -> int:
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must fit in {bits} unsigned bits, got {value:#x}")
    return value


def _tail(d4: bytes | Iterable[int]) -> bytes:
    tail = bytes(d4)
    if len(tail) != 8:
        raise ValueError(f"d4 must hold exactly 8 bytes, got {len(tail)}")
    return tail


def check_length(b: bytes | bytearray | memoryview | Iterable[int]) -> bytes:
    """Return ``b`` as bytes, raising a BYTE_LENGTH error unless it holds 16 bytes."""
    if isinstance(b, int):
        raise TypeError("expected a sequence of bytes, got an int")
    data = bytes(b)
    if len(data) != 16:
        raise UuidError(ErrorKind.BYTE_LENGTH, length=len(data))
    return data


def fields_to_bytes(d1: int, d2: int, d3: int, d4: bytes | Iterable[int]) -> bytes:
    """Lay out the four UUID fields in big-endian order."""
    return (
        _check_unsigned("d1", d1, 32).to_bytes(4, "big")
        + _check_unsigned("d2", d2, 16).to_bytes(2, "big")
        + _check_unsigned("d3", d3, 16).to_bytes(2, "big")
        + _tail(d4)
    )


def fields_le_to_bytes(d1: int, d2: int, d3: int, d4: bytes | Iterable[int]) -> bytes:
    """Lay out the four UUID fields with ``d1``, ``d2`` and ``d3`` byte-swapped."""
    return (
        _check_unsigned("d1", d1, 32).to_bytes(4, "little")
        + _check_unsigned("d2", d2, 16).to_bytes(2, "little")
        + _check_unsigned("d3", d3, 16).to_bytes(2, "little")
        + _tail(d4)
    )


def u128_to_bytes(v: int) -> bytes:
    """Encode a 128-bit value as 16 big-endian bytes."""
    return _check_unsigned("v", v, 128).to_bytes(16, "big")


def u128_le_to_bytes(v: int) -> bytes:
    """Encode a 128-bit value with its whole byte order reversed."""
    return _check_unsigned("v", v, 128).to_bytes(16, "little")


def u64_pair_to_bytes(high_bits: int, low_bits: int) -> bytes:
    """Encode two 64-bit halves, high half first, as 16 big-endian bytes."""
    return _check_unsigned("high_bits", high_bits, 64).to_bytes(8, "big") + _check_unsigned(
        "low_bits", low_bits, 64
    ).to_bytes(8, "big")


def swap_field_order(b: bytes | bytearray | memoryview | Iterable[int]) -> bytes:
    """Flip the byte order of the first three fields of a 16-byte UUID."""
    data = check_length(b)
    return data[3::-1] + data[5:3:-1] + data[7:5:-1] + data[8:]