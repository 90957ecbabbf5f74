"""Parse an ST00012 line back into a :class:`~qr_payment.payment.Payment`.

The parser is strict and single pass: the first problem aborts the whole
line and no partial payment is ever returned.

States: expect prefix -> expect field* -> done.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

from .errors import (
    CustomFieldRejected,
    DuplicateRequiredField,
    EncodingError,
    InvalidFieldValue,
    MalformedField,
    MissingRequiredField,
    PrefixMismatch,
    QRPaymentError,
)
from .fields import REQUIRED_KEYS, SEPARATOR, STANDARD_KEYS, validate_field
from .metrics import record_parse_failure, record_parsed
from .payment import Payment
from .requisites import AnyRequisite, Custom, CustomRequisites, RequiredRequisite, Requisite
from .serializer import PREFIX

__all__ = ["PaymentParser"]

_LOG = logging.getLogger(__name__)


class PaymentParser:
    """Strict ST00012 parser.

    Args:
        custom: type implementing :class:`CustomRequisites`; every key that
            is neither required nor a standard optional field is handed to
            ``custom.from_pair``. Without it such keys are rejected.
    """

    def __init__(self, custom: Optional[Type[CustomRequisites]] = None) -> None:
        self._custom = custom

    def from_str(self, text: str) -> Payment:
        """Parse a decoded line.

        Raises:
            PrefixMismatch, MalformedField, SizeViolation, InvalidFieldValue,
            DuplicateRequiredField, MissingRequiredField, CustomFieldRejected
        """
        try:
            payment = self._parse(text)
        except QRPaymentError as exc:
            record_parse_failure(type(exc).__name__)
            _LOG.debug(
                "rejected payment line: %s",
                exc,
                extra={
                    "error": type(exc).__name__,
                    "requisite": getattr(exc, "field", None) or getattr(exc, "key", None),
                },
            )
            raise
        record_parsed()
        _LOG.debug("parsed payment: %d additional requisites", len(payment.additional))
        return payment

    def from_bytes(self, raw: bytes) -> Payment:
        """Decode *raw* as strict UTF-8, then parse.

        Raises:
            EncodingError: plus everything :meth:`from_str` raises.
        """
        try:
            text = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            record_parse_failure(EncodingError.__name__)
            raise EncodingError(str(exc)) from exc
        return self.from_str(text)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _parse(self, text: str) -> Payment:
        prefix, *tokens = text.split(SEPARATOR)
        if prefix != PREFIX:
            raise PrefixMismatch(prefix, PREFIX)

        required: Dict[str, str] = {}
        additional: List[AnyRequisite] = []

        for token in tokens:
            key, sep, value = token.partition("=")
            if not sep:
                raise MalformedField(token)

            if key in REQUIRED_KEYS:
                if key in required:
                    raise DuplicateRequiredField(key)
                validate_field(key, value)
                required[key] = value
            elif key in STANDARD_KEYS:
                additional.append(Requisite(key, value))
            else:
                additional.append(self._custom_requisite(key, value))

        for key in REQUIRED_KEYS:
            if key not in required:
                raise MissingRequiredField(key)

        return Payment(
            required=RequiredRequisite.from_keys(required),
            additional=tuple(additional),
        )

    def _custom_requisite(self, key: str, value: str) -> Custom:
        if self._custom is None:
            raise CustomFieldRejected(key, value)
        try:
            requisite = self._custom.from_pair(key, value)
            if requisite is None:
                raise CustomFieldRejected(key, value)
            # the converted object must still be a well-formed custom field
            return Custom(requisite)
        except CustomFieldRejected:
            raise
        except (ValueError, LookupError, TypeError, InvalidFieldValue) as exc:
            raise CustomFieldRejected(key, value) from exc
