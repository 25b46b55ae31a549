"""Domain layer - validated values, payment instruments and payment states."""

from safe_payments.domain.errors import (
    ChecksumError,
    CompositionError,
    ErrorKind,
    RangeError,
    Rule,
    ShapeError,
    TemporalError,
    ValidationError,
    ValidationErrors,
)
from safe_payments.domain.exceptions import DomainError, ValidationFailed
from safe_payments.domain.payment import (
    PaidPayment,
    Payment,
    PaymentStatus,
    PendingPayment,
    RefundedPayment,
    VoidPayment,
    payment_status,
    transition_to_paid,
    transition_to_refunded,
    transition_to_void,
)
from safe_payments.domain.payment_methods import (
    CASH,
    Cash,
    Check,
    CreditCard,
    PaymentMethod,
    PaymentMethodType,
    method_type,
)
from safe_payments.domain.result import Err, Ok, Result, Rules, accumulate, attempt, zip_or_accumulate
from safe_payments.domain.scalars import (
    ChecksumString,
    DigitString,
    EmailAddress,
    ExpiryDate,
    FutureDate,
    NonEmptyString,
    NonNegativeNumber,
    PasswordPolicy,
    PositiveAmount,
    PositiveNumber,
    RoutingNumber,
    StrongPassword,
    YearMonth,
)


__all__ = [
    "CASH",
    "Cash",
    "Check",
    "ChecksumError",
    "ChecksumString",
    "CompositionError",
    "CreditCard",
    "DigitString",
    "DomainError",
    "EmailAddress",
    "Err",
    "ErrorKind",
    "ExpiryDate",
    "FutureDate",
    "NonEmptyString",
    "NonNegativeNumber",
    "Ok",
    "PaidPayment",
    "PasswordPolicy",
    "Payment",
    "PaymentMethod",
    "PaymentMethodType",
    "PaymentStatus",
    "PendingPayment",
    "PositiveAmount",
    "PositiveNumber",
    "RangeError",
    "RefundedPayment",
    "Result",
    "RoutingNumber",
    "Rule",
    "Rules",
    "ShapeError",
    "StrongPassword",
    "TemporalError",
    "ValidationError",
    "ValidationErrors",
    "ValidationFailed",
    "VoidPayment",
    "YearMonth",
    "accumulate",
    "attempt",
    "method_type",
    "payment_status",
    "transition_to_paid",
    "transition_to_refunded",
    "transition_to_void",
    "zip_or_accumulate",
]
