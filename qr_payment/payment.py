"""Payment record and its builder."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict

from . import serializer
from .requisites import AnyRequisite, CustomRequisites, RequiredRequisite

if TYPE_CHECKING:  # pragma: no cover
    from .parser import PaymentParser

__all__ = ["Payment", "PaymentBuilder"]


class Payment(BaseModel):
    """Immutable, validated ST00012 payment.

    ``additional`` keeps the order requisites were added in (or the order
    they appeared in the parsed line). Equality is structural.
    """

    model_config = ConfigDict(frozen=True)

    required: RequiredRequisite
    additional: Tuple[AnyRequisite, ...] = ()

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    @classmethod
    def builder(cls, required: RequiredRequisite) -> "PaymentBuilder":
        return PaymentBuilder(required)

    @classmethod
    def parser(cls, custom: Optional[Type[CustomRequisites]] = None) -> "PaymentParser":
        from .parser import PaymentParser

        return PaymentParser(custom)

    @classmethod
    def from_str(cls, text: str, custom: Optional[Type[CustomRequisites]] = None) -> "Payment":
        return cls.parser(custom).from_str(text)

    @classmethod
    def from_bytes(cls, raw: bytes, custom: Optional[Type[CustomRequisites]] = None) -> "Payment":
        return cls.parser(custom).from_bytes(raw)

    # ------------------------------------------------------------------
    # lookup
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[str]:
        """Return the value of the first field named *key*, or ``None``.

        Required fields are checked before additional ones; the match is
        case-sensitive.
        """
        for k, v in self.pairs():
            if k == key:
                return v
        return None

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """All ``(key, value)`` pairs in serialization order."""
        return serializer.iter_pairs(self)

    # ------------------------------------------------------------------
    # serialization
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        return serializer.to_bytes(self)

    def write_to(self, buffer: bytearray) -> None:
        serializer.write_to(self, buffer)

    def to_utf8_lossy(self) -> str:
        return serializer.to_utf8_lossy(self)

    def __str__(self) -> str:
        return self.to_utf8_lossy()


class PaymentBuilder:
    """Collects requisites for a :class:`Payment`.

    All validation happens when the requisites themselves are created, so
    ``build()`` cannot fail.
    """

    def __init__(self, required: RequiredRequisite) -> None:
        self._required = required
        self._additional: List[AnyRequisite] = []

    def with_additional_requisites(self, requisites: Iterable[AnyRequisite]) -> "PaymentBuilder":
        self._additional.extend(requisites)
        return self

    def with_additional_requisite(self, requisite: AnyRequisite) -> "PaymentBuilder":
        self._additional.append(requisite)
        return self

    def build(self) -> Payment:
        return Payment(required=self._required, additional=tuple(self._additional))
