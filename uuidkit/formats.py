"""Text renderings of a UUID: hyphenated, simple, URN and braced."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from uuidkit.fields import check_length

__all__ = ["Hyphenated", "Simple", "Urn", "Braced"]

_HEX_GROUPS = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))


@dataclass(frozen=True, order=True)
class _Format:
    """A UUID paired with the way it is written out.

    The wrapped value is anything that converts to 16 bytes with ``bytes()``.
    """

    uuid: Any

    LENGTH: ClassVar[int] = 36
    _PREFIX: ClassVar[str] = ""
    _SUFFIX: ClassVar[str] = ""
    _HYPHENATE: ClassVar[bool] = True

    def _render(self, upper: bool) -> str:
        text = check_length(bytes(self.uuid)).hex()
        if upper:
            text = text.upper()
        if self._HYPHENATE:
            text = "-".join(text[start:end] for start, end in _HEX_GROUPS)
        return f"{self._PREFIX}{text}{self._SUFFIX}"

    def _format(self, spec: str) -> str:
        if spec == "X":
            return self._render(upper=True)
        if spec in ("", "x"):
            return self._render(upper=False)
        return format(self._render(upper=False), spec)


class Hyphenated(_Format):
    """A UUID written like ``67e55044-10b1-426f-9247-bb680e5fe0c8``."""

    LENGTH: ClassVar[int] = 36

    @classmethod
    def from_uuid(cls, uuid: Any) -> Hyphenated:
        """Wrap ``uuid`` in this format."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return self._render(upper=False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return self._render(upper=True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid

    def __str__(self) -> str:
        return self.encode_lower()

    def __format__(self, spec: str) -> str:
        return self._format(spec)


class Simple(_Format):
    """A UUID written like ``67e5504410b1426f9247bb680e5fe0c8``."""

    LENGTH: ClassVar[int] = 32
    _HYPHENATE: ClassVar[bool] = False

    @classmethod
    def from_uuid(cls, uuid: Any) -> Simple:
        """Wrap ``uuid`` in this format."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return self._render(upper=False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return self._render(upper=True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid

    def __str__(self) -> str:
        return self.encode_lower()

    def __format__(self, spec: str) -> str:
        return self._format(spec)


class Urn(_Format):
    """A UUID written like ``urn:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8``."""

    LENGTH: ClassVar[int] = 45
    _PREFIX: ClassVar[str] = "urn:uuid:"

    @classmethod
    def from_uuid(cls, uuid: Any) -> Urn:
        """Wrap ``uuid`` in this format."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return self._render(upper=False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return self._render(upper=True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid

    def __str__(self) -> str:
        return self.encode_lower()

    def __format__(self, spec: str) -> str:
        return self._format(spec)


class Braced(_Format):
    """A UUID written like ``{67e55044-10b1-426f-9247-bb680e5fe0c8}``."""

    LENGTH: ClassVar[int] = 38
    _PREFIX: ClassVar[str] = "{"
    _SUFFIX: ClassVar[str] = "}"

    @classmethod
    def from_uuid(cls, uuid: Any) -> Braced:
        """Wrap ``uuid`` in this format."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return self._render(upper=False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return self._render(upper=True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid

    def __str__(self) -> str:
        return self.encode_lower()

    def __format__(self, spec: str) -> str:
        return self._format(spec)