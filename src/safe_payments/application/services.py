from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, assert_never

import structlog

from safe_payments.application.clock import Clock, SystemClock
from safe_payments.domain.errors import ValidationErrors
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
from safe_payments.domain.result import Err, Ok, Result, accumulate, zip_or_accumulate
from safe_payments.domain.scalars import PositiveAmount


logger = structlog.get_logger()

Amount = Decimal | int | float | str


@dataclass
class CardPaymentCommand:
    card_number: str
    expiry_month: int
    expiry_year: int
    cvv: str
    amount: Amount


@dataclass
class CheckPaymentCommand:
    routing_number: str
    account_number: str
    amount: Amount


@dataclass
class CashPaymentCommand:
    amount: Amount


@dataclass
class PaymentMethodResponse:
    type: PaymentMethodType
    card_last4: str | None = None
    routing_number: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "card_last4": self.card_last4,
            "routing_number": self.routing_number,
        }


@dataclass
class PaymentResponse:
    amount: Decimal
    status: PaymentStatus
    payment_method: PaymentMethodResponse
    paid_date: str | None = None
    voided_date: str | None = None
    refunded_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": str(self.amount),
            "status": self.status.value,
            "payment_method": self.payment_method.to_dict(),
            "paid_date": self.paid_date,
            "voided_date": self.voided_date,
            "refunded_date": self.refunded_date,
        }


@dataclass
class FieldErrorResponse:
    field: str
    kind: str
    rule: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "kind": self.kind, "rule": self.rule, "message": self.message}


@dataclass
class ErrorResponse:
    message: str
    errors: list[FieldErrorResponse] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "errors": [error.to_dict() for error in self.errors]}


def describe_errors(errors: ValidationErrors) -> str:
    """Render every error message as one bracketed, comma-separated block."""
    return "[\n" + ",\n".join(f"  {error.message}" for error in errors) + "\n]"


def to_method_response(method: PaymentMethod) -> PaymentMethodResponse:
    match method:
        case Cash():
            return PaymentMethodResponse(type=PaymentMethodType.CASH)
        case CreditCard():
            return PaymentMethodResponse(type=PaymentMethodType.CREDIT_CARD, card_last4=method.last4)
        case Check():
            return PaymentMethodResponse(type=PaymentMethodType.CHECK, routing_number=method.routing_number.value)
        case _:
            assert_never(method)


def to_payment_response(payment: Payment) -> PaymentResponse:
    response = PaymentResponse(
        amount=payment.amount.value,
        status=payment_status(payment),
        payment_method=to_method_response(payment.method),
    )
    match payment:
        case PendingPayment():
            pass
        case PaidPayment():
            response.paid_date = payment.paid_at.isoformat()
        case VoidPayment():
            response.voided_date = payment.voided_at.isoformat()
        case RefundedPayment():
            response.refunded_date = payment.refunded_at.isoformat()
        case _:
            assert_never(payment)
    return response


def to_error_response(errors: ValidationErrors, message: str = "Payment validation failed") -> ErrorResponse:
    return ErrorResponse(
        message=message,
        errors=[
            FieldErrorResponse(
                field=error.field_name,
                kind=error.kind.value,
                rule=error.rule.value,
                message=error.message,
            )
            for error in errors
        ],
    )


class PaymentService:
    """Turns primitive payment requests into validated, settled payments.

    Amount and payment method are validated together, so a request with a bad
    amount and a bad card number gets both errors back at once.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or SystemClock()

    def create_card_payment(self, cmd: CardPaymentCommand) -> Result[PendingPayment]:
        return zip_or_accumulate(
            PositiveAmount.create(cmd.amount, "amount"),
            CreditCard.create(
                cmd.card_number, cmd.expiry_month, cmd.expiry_year, cmd.cvv, now=self.clock.current_month()
            ),
            combine=PendingPayment,
        )

    def create_check_payment(self, cmd: CheckPaymentCommand) -> Result[PendingPayment]:
        return accumulate(
            lambda: PositiveAmount.create(cmd.amount, "amount").unwrap(),
            lambda: Check.create(cmd.routing_number, cmd.account_number).unwrap(),
            combine=PendingPayment,
        )

    def create_cash_payment(self, cmd: CashPaymentCommand) -> Result[PendingPayment]:
        return PositiveAmount.create(cmd.amount, "amount").map(lambda amount: PendingPayment(amount, CASH))

    def process_card_payment(self, cmd: CardPaymentCommand) -> Result[PaidPayment]:
        log = logger.bind(method=PaymentMethodType.CREDIT_CARD.value)
        return self._settle(self.create_card_payment(cmd), log)

    def process_check_payment(self, cmd: CheckPaymentCommand) -> Result[PaidPayment]:
        log = logger.bind(method=PaymentMethodType.CHECK.value)
        return self._settle(self.create_check_payment(cmd), log)

    def process_cash_payment(self, cmd: CashPaymentCommand) -> Result[PaidPayment]:
        log = logger.bind(method=PaymentMethodType.CASH.value)
        return self._settle(self.create_cash_payment(cmd), log)

    def void_payment(self, payment: PendingPayment) -> VoidPayment:
        voided = transition_to_void(payment, self._now())
        logger.info("payment_voided", amount=str(voided.amount.value), method=method_type(voided.method).value)
        return voided

    def refund_payment(self, payment: PaidPayment) -> RefundedPayment:
        refunded = transition_to_refunded(payment, self._now())
        logger.info("payment_refunded", amount=str(refunded.amount.value), method=method_type(refunded.method).value)
        return refunded

    def _settle(self, result: Result[PendingPayment], log: structlog.stdlib.BoundLogger) -> Result[PaidPayment]:
        match result:
            case Ok(pending):
                paid = transition_to_paid(pending, self._now())
                log.info("payment_paid", amount=str(paid.amount.value), paid_at=paid.paid_at.isoformat())
                return Ok(paid)
            case Err(errors) as failure:
                log.warning(
                    "payment_rejected",
                    error_count=len(errors),
                    fields=sorted({error.field_name for error in errors}),
                )
                return failure
            case _:
                assert_never(result)

    def _now(self) -> datetime:
        return self.clock.now()
