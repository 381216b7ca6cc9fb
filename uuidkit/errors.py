"""Errors raised when a UUID cannot be built or parsed, and their diagnosis."""

from __future__ import annotations

import string
from enum import Enum
from typing import Any

__all__ = ["ErrorKind", "UuidError", "diagnose"]

_URN_PREFIX = "urn:uuid:"
_HEX_DIGITS = frozenset(string.hexdigits)
_BLOCK_STARTS = (0, 9, 14, 19, 24)
_GROUP_LENGTHS = (8, 4, 4, 4, 12)


class ErrorKind(Enum):
    """The kinds of failure a UUID operation can report."""

    CHAR = "char"
    SIMPLE_LENGTH = "simple_length"
    BYTE_LENGTH = "byte_length"
    GROUP_COUNT = "group_count"
    GROUP_LENGTH = "group_length"
    INVALID_UTF8 = "invalid_utf8"
    OTHER = "other"


_DETAIL_FIELDS: dict[ErrorKind, tuple[str, ...]] = {
    ErrorKind.CHAR: ("character", "index"),
    ErrorKind.SIMPLE_LENGTH: ("length",),
    ErrorKind.BYTE_LENGTH: ("length",),
    ErrorKind.GROUP_COUNT: ("count",),
    ErrorKind.GROUP_LENGTH: ("group", "length", "index"),
    ErrorKind.INVALID_UTF8: (),
    ErrorKind.OTHER: (),
}


class UuidError(ValueError):
    """A failure while building or parsing a UUID.

    The details that go with each kind are given as keyword arguments:
    ``character`` and ``index`` for CHAR, ``length`` for SIMPLE_LENGTH and
    BYTE_LENGTH, ``count`` for GROUP_COUNT, and ``group``, ``length`` and
    ``index`` for GROUP_LENGTH.
    """

    def __init__(self, kind: ErrorKind, **kwargs: Any) -> None:
        kind = ErrorKind(kind)
        expected = _DETAIL_FIELDS[kind]
        missing = [name for name in expected if name not in kwargs]
        extra = sorted(set(kwargs) - set(expected))
        if missing or extra:
            raise TypeError(
                f"{kind.name} takes details {list(expected)}, "
                f"missing {missing}, unexpected {extra}"
            )
        if kind is ErrorKind.GROUP_LENGTH and not 0 <= kwargs["group"] < len(_GROUP_LENGTHS):
            raise ValueError(f"group must be between 0 and 4, got {kwargs['group']}")
        self.kind = kind
        self.details = dict(kwargs)
        self.character: str | None = kwargs.get("character")
        self.index: int | None = kwargs.get("index")
        self.length: int | None = kwargs.get("length")
        self.count: int | None = kwargs.get("count")
        self.group: int | None = kwargs.get("group")
        super().__init__(self._message())

    def _message(self) -> str:
        kind = self.kind
        if kind is ErrorKind.CHAR:
            return (
                "invalid character: expected an optional prefix of `urn:uuid:` "
                f"followed by [0-9a-fA-F-], found `{self.character}` at {self.index}"
            )
        if kind is ErrorKind.SIMPLE_LENGTH:
            return f"invalid length: expected length 32 for simple format, found {self.length}"
        if kind is ErrorKind.BYTE_LENGTH:
            return f"invalid length: expected 16 bytes, found {self.length}"
        if kind is ErrorKind.GROUP_COUNT:
            return f"invalid group count: expected 5, found {self.count}"
        if kind is ErrorKind.GROUP_LENGTH:
            expected = _GROUP_LENGTHS[self.group]
            return (
                f"invalid group length in group {self.group}: "
                f"expected {expected}, found {self.length}"
            )
        if kind is ErrorKind.INVALID_UTF8:
            return "non-UTF8 input"
        return "failed to parse a UUID"

    def __str__(self) -> str:
        return self._message()

    def __repr__(self) -> str:
        details = ", ".join(f"{name}={value!r}" for name, value in self.details.items())
        prefix = f"{type(self).__name__}(ErrorKind.{self.kind.name}"
        return f"{prefix}, {details})" if details else f"{prefix})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UuidError):
            return NotImplemented
        return self.kind is other.kind and self.details == other.details

    def __hash__(self) -> int:
        return hash((self.kind, tuple(sorted(self.details.items()))))


def diagnose(data: str | bytes | bytearray | memoryview) -> UuidError:
    """Explain why ``data`` is not a UUID string.

    ``data`` must be input that has already failed to parse; the returned
    error describes the first problem found in it.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError:
            return UuidError(ErrorKind.INVALID_UTF8)
    else:
        text = data

    if len(text) >= 2 and text.startswith("{") and text.endswith("}"):
        body, offset, simple = text[1:-1], 1, False
    elif text.startswith(_URN_PREFIX):
        body, offset, simple = text[len(_URN_PREFIX):], len(_URN_PREFIX), False
    else:
        body, offset, simple = text, 0, True

    hyphens: list[int] = []
    for index, character in enumerate(body):
        if character == "-":
            hyphens.append(index)
        elif character not in _HEX_DIGITS:
            return UuidError(ErrorKind.CHAR, character=character, index=index + offset + 1)

    if not hyphens and simple:
        # Every character is a hex digit, so only the length can be wrong.
        return UuidError(ErrorKind.SIMPLE_LENGTH, length=len(text.encode("utf-8")))
    if len(hyphens) != 4:
        return UuidError(ErrorKind.GROUP_COUNT, count=len(hyphens) + 1)

    for group, (bound, start, next_start) in enumerate(
        zip(hyphens, _BLOCK_STARTS, _BLOCK_STARTS[1:])
    ):
        if bound != next_start - 1:
            return UuidError(
                ErrorKind.GROUP_LENGTH,
                group=group,
                length=bound - start,
                index=offset + start + 1,
            )

    last_start = _BLOCK_STARTS[-1]
    return UuidError(
        ErrorKind.GROUP_LENGTH,
        group=4,
        length=len(body) - last_start,
        index=offset + last_start + 1,
    )