"""ST00012 payment requisites (GOST R 56042): build, serialize, parse."""
from .errors import (  # noqa: F401
    CustomFieldRejected,
    DuplicateRequiredField,
    EncodingError,
    InvalidFieldValue,
    MalformedField,
    MissingRequiredField,
    PrefixMismatch,
    QRPaymentError,
    SizeViolation,
)
from .fields import RequiredKey, RequisiteKey, TechCode  # noqa: F401
from .parser import PaymentParser  # noqa: F401
from .payment import Payment, PaymentBuilder  # noqa: F401
from .requisites import Custom, CustomRequisites, RequiredRequisite, Requisite  # noqa: F401
from .serializer import PREFIX  # noqa: F401
from .sized import Size, SizedString, to_exact_size, to_max_size  # noqa: F401
