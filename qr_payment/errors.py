"""Errors raised while building, serializing or parsing an ST00012 payment.

All of them derive from :class:`QRPaymentError`. The base class is a plain
``Exception`` (not ``ValueError``) so that pydantic validators re-raise it
unchanged instead of folding it into a ``ValidationError``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .sized import Size

__all__ = [
    "QRPaymentError",
    "SizeViolation",
    "PrefixMismatch",
    "MalformedField",
    "MissingRequiredField",
    "DuplicateRequiredField",
    "CustomFieldRejected",
    "InvalidFieldValue",
    "EncodingError",
]


class QRPaymentError(Exception):
    """Base error for this package."""


class SizeViolation(QRPaymentError):
    """Value byte length does not satisfy its size class."""

    def __init__(self, field: Optional[str], expected: "Size", actual: int) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        where = f"{field}: " if field else ""
        super().__init__(f"{where}expected {expected} bytes, got {actual}")


class PrefixMismatch(QRPaymentError):
    """Input does not start with the mandated version token."""

    def __init__(self, passed: str, expected: str) -> None:
        self.passed = passed
        self.expected = expected
        super().__init__(f"expected prefix {expected!r}, got {passed!r}")


class MalformedField(QRPaymentError):
    """A token has no ``key=value`` separator."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"malformed field (no '='): {token!r}")


class MissingRequiredField(QRPaymentError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"required field {field!r} is missing")


class DuplicateRequiredField(QRPaymentError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"required field {field!r} appears more than once")


class CustomFieldRejected(QRPaymentError):
    """An unknown key was not accepted by the custom requisite type."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"unknown requisite: {key}={value}")


class InvalidFieldValue(QRPaymentError):
    """Value has the right size but breaks a field rule."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


class EncodingError(QRPaymentError):
    """Raw payment bytes are not valid UTF-8."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"payment body is not valid UTF-8: {reason}")
