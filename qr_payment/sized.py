"""Byte-length constrained strings.

The standard budgets every field in bytes, assuming one byte per character.
We measure the UTF-8 encoding, so Cyrillic text (two bytes per letter) fits
roughly half as many characters as the limit suggests. This is a known
limitation of the format, not something we try to correct.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import SizeViolation

__all__ = [
    "SizeKind",
    "Size",
    "SizedString",
    "byte_length",
    "to_exact_size",
    "to_max_size",
]


class SizeKind(Enum):
    EXACT = "exact"
    MAX = "max"


def byte_length(value: str) -> int:
    """Return the UTF-8 byte length of *value*."""
    return len(value.encode("utf-8"))


@dataclass(frozen=True, slots=True)
class Size:
    """Size class of a field: exactly ``limit`` bytes or at most ``limit``."""

    kind: SizeKind
    limit: int

    @classmethod
    def exact(cls, limit: int) -> "Size":
        return cls(SizeKind.EXACT, limit)

    @classmethod
    def max(cls, limit: int) -> "Size":
        return cls(SizeKind.MAX, limit)

    def accepts(self, value: str) -> bool:
        n = byte_length(value)
        if self.kind is SizeKind.EXACT:
            return n == self.limit
        return n <= self.limit

    def check(self, value: str, field: Optional[str] = None) -> None:
        """Raise :class:`SizeViolation` unless *value* fits."""
        if not self.accepts(value):
            raise SizeViolation(field, self, byte_length(value))

    def __str__(self) -> str:
        op = "==" if self.kind is SizeKind.EXACT else "<="
        return f"{op} {self.limit}"


@dataclass(frozen=True, slots=True)
class SizedString:
    """A string that always satisfies its :class:`Size`.

    Construction is the only validation point; the instance is immutable.
    """

    value: str
    size: Size

    def __post_init__(self) -> None:
        self.size.check(self.value)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return byte_length(self.value)


def _sized(value: str, size: Size, field: Optional[str]) -> SizedString:
    if isinstance(value, SizedString):
        value = value.value
    # check first so the error carries the field name
    size.check(value, field)
    return SizedString(value, size)


def to_exact_size(value: str, n: int, *, field: Optional[str] = None) -> SizedString:
    """Wrap *value*; its byte length must equal *n*."""
    return _sized(value, Size.exact(n), field)


def to_max_size(value: str, n: int, *, field: Optional[str] = None) -> SizedString:
    """Wrap *value*; its byte length must not exceed *n*."""
    return _sized(value, Size.max(n), field)
