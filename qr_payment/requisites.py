"""Requisite models: the five mandatory fields, standard optional fields and
the extension point for caller-defined fields."""
from __future__ import annotations

from typing import (
    Any,
    Dict,
    Final,
    Iterator,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from . import config
from .errors import InvalidFieldValue
from .fields import (
    REQUIRED_KEYS,
    SEPARATOR,
    STANDARD_KEYS,
    RequiredKey,
    RequisiteKey,
    validate_field,
)
from .sized import SizedString

__all__ = [
    "RequiredRequisite",
    "Requisite",
    "CustomRequisites",
    "Custom",
    "AnyRequisite",
]

# model attribute -> wire key, in canonical order
_REQUIRED_ATTRS: Final[Dict[str, str]] = {
    "name": RequiredKey.NAME.value,
    "personal_acc": RequiredKey.PERSONAL_ACC.value,
    "bank_name": RequiredKey.BANK_NAME.value,
    "bic": RequiredKey.BIC.value,
    "correspondent_acc": RequiredKey.CORRESP_ACC.value,
}


class RequiredRequisite(BaseModel):
    """The mandatory block of every payment.

    Fields accept ``str`` or :class:`SizedString`; either way the stored
    value is re-checked against the size class the standard fixes for it:

    ================= =========== ======
    attribute         key         size
    ================= =========== ======
    name              Name        <= 160
    personal_acc      PersonalAcc == 20
    bank_name         BankName    <= 45
    bic               BIC         == 9
    correspondent_acc CorrespAcc  <= 20
    ================= =========== ======
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: SizedString
    personal_acc: SizedString
    bank_name: SizedString
    bic: SizedString
    correspondent_acc: SizedString

    @field_validator("*", mode="before")
    @classmethod
    def _apply_size_class(cls, value: Any, info: ValidationInfo) -> Any:
        return validate_field(_REQUIRED_ATTRS[info.field_name], value)

    @classmethod
    def from_keys(cls, values: Mapping[str, str]) -> "RequiredRequisite":
        """Build from a mapping keyed by wire names (``Name``, ``BIC``...)."""
        return cls(**{attr: values[key] for attr, key in _REQUIRED_ATTRS.items()})

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(key, value)`` in canonical order."""
        for attr, key in _REQUIRED_ATTRS.items():
            yield key, getattr(self, attr).value

    def get(self, key: str) -> Optional[str]:
        for k, v in self.pairs():
            if k == key:
                return v
        return None


class Requisite(BaseModel):
    """One standard optional field, e.g. ``Requisite("Sum", "100000")``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: RequisiteKey
    content: Union[SizedString, str]

    def __init__(self, kind: Union[RequisiteKey, str], value: Union[str, SizedString]) -> None:
        super().__init__(kind=kind, content=value)

    @field_validator("content", mode="before")
    @classmethod
    def _apply_field_rules(cls, value: Any, info: ValidationInfo) -> Any:
        kind = info.data.get("kind")
        if kind is None:
            # kind already failed validation; pydantic reports that instead
            return value
        return validate_field(kind.value, value)

    @property
    def key(self) -> str:
        return self.kind.value

    @property
    def value(self) -> str:
        return str(self.content)


@runtime_checkable
class CustomRequisites(Protocol):
    """Contract for caller-defined requisites.

    Enums work well: ``value`` comes for free and ``key`` is a property.
    ``from_pair`` is offered every key the parser does not recognise; it
    returns an instance or raises ``CustomFieldRejected``, ``ValueError`` or
    ``LookupError``.
    """

    @property
    def key(self) -> str:
        ...

    @property
    def value(self) -> str:
        ...

    @classmethod
    def from_pair(cls, key: str, value: str) -> "CustomRequisites":
        ...


class Custom(BaseModel):
    """Wraps a :class:`CustomRequisites` object as a payment requisite."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    requisite: Any

    def __init__(self, requisite: CustomRequisites) -> None:
        super().__init__(requisite=requisite)

    @field_validator("requisite")
    @classmethod
    def _check_requisite(cls, requisite: Any) -> Any:
        if not isinstance(requisite, CustomRequisites):
            raise TypeError(
                f"{type(requisite).__name__} does not implement key/value/from_pair"
            )
        key, value = requisite.key, requisite.value
        if not key or "=" in key or SEPARATOR in key:
            raise InvalidFieldValue(key, value, "custom key must be non-empty without '=' or '|'")
        if key in REQUIRED_KEYS or key in STANDARD_KEYS:
            raise InvalidFieldValue(key, value, "custom key clashes with a standard field")
        if config.reject_separator_in_values() and SEPARATOR in value:
            raise InvalidFieldValue(key, value, f"value contains the {SEPARATOR!r} separator")
        return requisite

    @property
    def key(self) -> str:
        return self.requisite.key

    @property
    def value(self) -> str:
        return self.requisite.value


AnyRequisite = Union[Requisite, Custom]
