"""Render a :class:`~qr_payment.payment.Payment` into its ST00012 line.

    ST00012|Name=...|PersonalAcc=...|BankName=...|BIC=...|CorrespAcc=...|Key=Value...

Required fields always come first in canonical order, followed by the
additional requisites in the order given to the builder. Nothing is escaped:
the standard defines no escaping for ``|`` or ``=``.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Iterator, Tuple

from .fields import SEPARATOR
from .metrics import record_encoded

if TYPE_CHECKING:  # pragma: no cover
    from .payment import Payment

__all__ = ["PREFIX", "iter_pairs", "write_to", "to_bytes", "to_utf8_lossy"]

_LOG = logging.getLogger(__name__)

# format id "ST", version "0001", charset "2" (UTF-8)
PREFIX: Final = "ST00012"


def iter_pairs(payment: "Payment") -> Iterator[Tuple[str, str]]:
    yield from payment.required.pairs()
    for requisite in payment.additional:
        yield requisite.key, requisite.value


def write_to(payment: "Payment", buffer: bytearray) -> None:
    """Append the encoded line to *buffer*."""
    start = len(buffer)
    buffer += PREFIX.encode("ascii")
    for key, value in iter_pairs(payment):
        buffer += f"{SEPARATOR}{key}={value}".encode("utf-8")
    record_encoded()
    _LOG.debug(
        "encoded payment: %d bytes, %d additional requisites",
        len(buffer) - start,
        len(payment.additional),
    )


def to_bytes(payment: "Payment") -> bytes:
    buffer = bytearray()
    write_to(payment, buffer)
    return bytes(buffer)


def to_utf8_lossy(payment: "Payment") -> str:
    """Return the line as text, replacing undecodable sequences."""
    return to_bytes(payment).decode("utf-8", errors="replace")
