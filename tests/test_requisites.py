import pydantic
import pytest

from qr_payment import (
    Custom,
    InvalidFieldValue,
    RequiredRequisite,
    Requisite,
    RequisiteKey,
    SizedString,
    SizeViolation,
    TechCode,
    to_max_size,
)
from qr_payment.fields import SIZES
from tests.samples import MyReq


def test_required_requisite_stores_sized_values(required):
    assert isinstance(required.personal_acc, SizedString)
    assert required.personal_acc.size == SIZES["PersonalAcc"]
    assert list(required.pairs()) == [
        ("Name", "ООО «Три кита»"),
        ("PersonalAcc", "40702810138250123017"),
        ("BankName", 'ОАО "БАНК"'),
        ("BIC", "044525225"),
        ("CorrespAcc", "30101810400000000225"),
    ]


@pytest.mark.parametrize(
    "attr,value,field",
    [
        ("personal_acc", "4070281013825012301", "PersonalAcc"),
        ("bic", "0445252251", "BIC"),
        ("bank_name", "Б" * 23, "BankName"),
        ("correspondent_acc", "3" * 21, "CorrespAcc"),
        ("name", "x" * 161, "Name"),
    ],
)
def test_required_requisite_size_violation(required, attr, value, field):
    data = {k: getattr(required, k).value for k in RequiredRequisite.model_fields}
    data[attr] = value
    with pytest.raises(SizeViolation) as exc_info:
        RequiredRequisite(**data)
    assert exc_info.value.field == field


def test_required_requisite_rechecks_sized_string(required):
    # a SizedString built with a looser class is held to the field's class
    with pytest.raises(SizeViolation):
        RequiredRequisite(
            name="n",
            personal_acc=to_max_size("123", 20),
            bank_name="b",
            bic="044525225",
            correspondent_acc="c",
        )


def test_required_requisite_is_frozen(required):
    with pytest.raises(pydantic.ValidationError):
        required.name = "other"  # type: ignore[misc]


def test_requisite_key_and_value():
    r = Requisite(RequisiteKey.PURPOSE, "Оплата членского взноса")
    assert r.key == "Purpose"
    assert r.value == "Оплата членского взноса"
    assert isinstance(r.content, SizedString)


def test_unbounded_requisite_keeps_plain_string():
    r = Requisite("PayerAddress", "г.Рязань ул.Ленина д.10 кв.15" * 20)
    assert r.content == "г.Рязань ул.Ленина д.10 кв.15" * 20


@pytest.mark.parametrize(
    "key,value",
    [
        ("PayeeINN", "6200098765123"),
        ("Sum", "1" * 19),
        ("KPP", "1234567890"),
        ("DrawerStatus", "011"),
    ],
)
def test_requisite_size_violation(key, value):
    with pytest.raises(SizeViolation) as exc_info:
        Requisite(key, value)
    assert exc_info.value.field == key


@pytest.mark.parametrize("value", ["100.50", "-1", "", "１２"])
def test_sum_must_be_ascii_digits(value):
    with pytest.raises(InvalidFieldValue):
        Requisite(RequisiteKey.SUM, value)


def test_tech_code():
    assert Requisite("TechCode", TechCode.CHARITY.value).value == "14"
    with pytest.raises(InvalidFieldValue):
        Requisite("TechCode", "16")


def test_required_key_is_not_an_optional_requisite():
    with pytest.raises(pydantic.ValidationError):
        Requisite("Name", "ООО «Три кита»")


def test_separator_in_value_is_rejected():
    with pytest.raises(InvalidFieldValue):
        Requisite("LastName", "Иванов|Петров")


def test_custom_wraps_protocol_object():
    c = Custom(MyReq.FOO)
    assert (c.key, c.value) == ("Foo", "Foo")
    assert c == Custom(MyReq.FOO)
    assert c != Custom(MyReq.BAR)


def test_custom_rejects_non_protocol_object():
    with pytest.raises(TypeError):
        Custom("Foo")  # type: ignore[arg-type]


class _Pair:
    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value

    @classmethod
    def from_pair(cls, key: str, value: str) -> "_Pair":
        return cls(key, value)


@pytest.mark.parametrize(
    "key,value",
    [
        ("Name", "Other"),
        ("BIC", "044525225"),
        ("Sum", "abc"),
        ("Purpose", "x"),
        ("TechCode", "02"),
    ],
)
def test_custom_key_cannot_shadow_standard_field(key, value):
    with pytest.raises(InvalidFieldValue) as exc_info:
        Custom(_Pair(key, value))
    assert exc_info.value.field == key
