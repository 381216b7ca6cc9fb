"""Parsing of UUID strings into their 16 bytes."""

from __future__ import annotations

from uuidkit.errors import diagnose

__all__ = ["try_parse"]

_HEX_BYTES = frozenset(b"0123456789abcdefABCDEF")
_URN_PREFIX = b"urn:uuid:"
_HYPHEN_POSITIONS = (8, 13, 18, 23)
_GROUP_SPANS = ((0, 8), (9, 13), (14, 18), (19, 23), (24, 36))


def _decode_hex(chunk: bytes) -> bytes | None:
    if not all(byte in _HEX_BYTES for byte in chunk):
        return None
    return bytes.fromhex(chunk.decode("ascii"))


def _parse_simple(raw: bytes) -> bytes | None:
    if len(raw) != 32:
        return None
    return _decode_hex(raw)


def _parse_hyphenated(raw: bytes) -> bytes | None:
    if len(raw) != 36:
        return None
    if any(raw[position] != ord("-") for position in _HYPHEN_POSITIONS):
        return None
    return _decode_hex(b"".join(raw[start:end] for start, end in _GROUP_SPANS))


def try_parse(text: str | bytes | bytearray) -> bytes:
    """Parse a simple, hyphenated, braced or URN UUID string into 16 bytes.

    Raises :class:`~uuidkit.errors.UuidError` describing the first problem
    when ``text`` is not a UUID.
    """
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    length = len(raw)

    if length == 32:
        result = _parse_simple(raw)
    elif length == 36:
        result = _parse_hyphenated(raw)
    elif length == 38 and raw.startswith(b"{") and raw.endswith(b"}"):
        result = _parse_hyphenated(raw[1:-1])
    elif length == 45 and raw.startswith(_URN_PREFIX):
        result = _parse_hyphenated(raw[len(_URN_PREFIX):])
    else:
        result = None

    if result is None:
        raise diagnose(text) from None
    return result