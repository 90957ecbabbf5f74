"""Standard field names and their size classes (GOST R 56042).

``SIZES`` is the single table both the builder-side models and the parser
consult; fields missing from it have no per-field ceiling.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Final, Optional, Union

from . import config
from .errors import InvalidFieldValue
from .sized import Size, SizedString

__all__ = [
    "SEPARATOR",
    "RequiredKey",
    "RequisiteKey",
    "TechCode",
    "SIZES",
    "REQUIRED_KEYS",
    "STANDARD_KEYS",
    "size_of",
    "validate_field",
]

SEPARATOR: Final = "|"


class RequiredKey(str, Enum):
    """Mandatory fields, in canonical emission order."""

    NAME = "Name"
    PERSONAL_ACC = "PersonalAcc"
    BANK_NAME = "BankName"
    BIC = "BIC"
    CORRESP_ACC = "CorrespAcc"


class RequisiteKey(str, Enum):
    """Standard optional fields."""

    # sized
    SUM = "Sum"  # amount in kopecks
    PURPOSE = "Purpose"
    PAYEE_INN = "PayeeINN"
    PAYER_INN = "PayerINN"
    DRAWER_STATUS = "DrawerStatus"
    KPP = "KPP"
    CBC = "CBC"
    OKTMO = "OKTMO"
    PAYT_REASON = "PaytReason"
    TAX_PERIOD = "TaxPeriod"
    DOC_NO = "DocNo"
    DOC_DATE = "DocDate"
    TAX_PAY_KIND = "TaxPayKind"

    # unbounded
    LAST_NAME = "LastName"
    FIRST_NAME = "FirstName"
    MIDDLE_NAME = "MiddleName"
    PAYER_ADDRESS = "PayerAddress"
    PERSONAL_ACCOUNT = "PersonalAccount"
    DOC_IDX = "DocIdx"
    PENS_ACC = "PensAcc"
    CONTRACT = "Contract"
    PERS_ACC = "PersAcc"
    FLAT = "Flat"
    PHONE = "Phone"
    PAYER_ID_TYPE = "PayerIdType"
    PAYER_ID_NUM = "PayerIdNum"
    CHILD_FIO = "ChildFio"
    BIRTH_DATE = "BirthDate"
    PAYM_TERM = "PaymTerm"
    PAYM_PERIOD = "PaymPeriod"
    CATEGORY = "Category"
    SERVICE_NAME = "ServiceName"
    COUNTER_ID = "CounterId"
    COUNTER_VAL = "CounterVal"
    QUITT_ID = "QuittId"
    QUITT_DATE = "QuittDate"
    INST_NUM = "InstNum"
    CLASS_NUM = "ClassNum"
    SPEC_FIO = "SpecFio"
    ADD_AMOUNT = "AddAmount"
    RULE_ID = "RuleId"
    EXEC_ID = "ExecId"
    REG_TYPE = "RegType"
    UIN = "UIN"

    # enumerated
    TECH_CODE = "TechCode"


class TechCode(str, Enum):
    """Technical payment code, lets the receiver route the payment."""

    MOBILE = "01"
    HOUSING_AND_UTILITIES = "02"
    TAXES = "03"  # traffic police, taxes, duties, budget payments
    SECURITY_SERVICES = "04"
    MIGRATION_SERVICE = "05"
    PENSION_FUND = "06"
    LOAN_REPAYMENTS = "07"
    EDUCATIONAL_INSTITUTIONS = "08"
    INTERNET_TV = "09"
    EMONEY = "10"
    VACATION = "11"
    INVESTMENT_INSURANCE = "12"
    SPORT_HEALTH = "13"
    CHARITY = "14"
    OTHER = "15"


SIZES: Final[Dict[str, Size]] = {
    RequiredKey.NAME.value: Size.max(160),
    RequiredKey.PERSONAL_ACC.value: Size.exact(20),
    RequiredKey.BANK_NAME.value: Size.max(45),
    RequiredKey.BIC.value: Size.exact(9),
    RequiredKey.CORRESP_ACC.value: Size.max(20),
    RequisiteKey.SUM.value: Size.max(18),
    RequisiteKey.PURPOSE.value: Size.max(210),
    RequisiteKey.PAYEE_INN.value: Size.max(12),
    RequisiteKey.PAYER_INN.value: Size.max(12),
    RequisiteKey.DRAWER_STATUS.value: Size.max(2),
    RequisiteKey.KPP.value: Size.max(9),
    RequisiteKey.CBC.value: Size.max(20),
    RequisiteKey.OKTMO.value: Size.max(11),
    RequisiteKey.PAYT_REASON.value: Size.max(2),
    RequisiteKey.TAX_PERIOD.value: Size.max(10),
    RequisiteKey.DOC_NO.value: Size.max(15),
    RequisiteKey.DOC_DATE.value: Size.max(10),
    RequisiteKey.TAX_PAY_KIND.value: Size.max(2),
}

REQUIRED_KEYS: Final = tuple(k.value for k in RequiredKey)
STANDARD_KEYS: Final = frozenset(k.value for k in RequisiteKey)


def size_of(key: str) -> Optional[Size]:
    return SIZES.get(key)


def validate_field(key: str, value: Union[str, SizedString]) -> Union[str, SizedString]:
    """Validate *value* for the standard field *key*.

    Returns a :class:`SizedString` for fields with a size class and the plain
    string otherwise.

    Raises:
        SizeViolation, InvalidFieldValue
    """
    raw = value.value if isinstance(value, SizedString) else value
    if not isinstance(raw, str):
        raise TypeError(f"{key} expects str, got {type(raw).__name__}")

    if config.reject_separator_in_values() and SEPARATOR in raw:
        raise InvalidFieldValue(key, raw, f"value contains the {SEPARATOR!r} separator")

    if key == RequisiteKey.SUM.value and not (raw.isascii() and raw.isdigit()):
        raise InvalidFieldValue(key, raw, "amount must be digits only (kopecks)")

    if key == RequisiteKey.TECH_CODE.value and raw not in {c.value for c in TechCode}:
        raise InvalidFieldValue(key, raw, "unknown technical code")

    size = size_of(key)
    if size is None:
        return raw
    size.check(raw, key)
    return SizedString(raw, size)
