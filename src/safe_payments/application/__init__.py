"""Application layer - payment service, commands and response projections."""

from safe_payments.application.clock import Clock, FixedClock, SystemClock
from safe_payments.application.services import (
    CardPaymentCommand,
    CashPaymentCommand,
    CheckPaymentCommand,
    ErrorResponse,
    FieldErrorResponse,
    PaymentMethodResponse,
    PaymentResponse,
    PaymentService,
    describe_errors,
    to_error_response,
    to_payment_response,
)


__all__ = [
    "CardPaymentCommand",
    "CashPaymentCommand",
    "CheckPaymentCommand",
    "Clock",
    "ErrorResponse",
    "FieldErrorResponse",
    "FixedClock",
    "PaymentMethodResponse",
    "PaymentResponse",
    "PaymentService",
    "SystemClock",
    "describe_errors",
    "to_error_response",
    "to_payment_response",
]
