"""Payment lifecycle as a closed set of states.

Each state carries only the fields that are legal in it, so a payment can
never be both paid and voided. Transitions accept exactly the state they are
legal from; calling one with any other state is a type error, which is why
the transition bodies contain no state checks.

    PendingPayment --transition_to_paid--> PaidPayment --transition_to_refunded--> RefundedPayment
    PendingPayment --transition_to_void--> VoidPayment
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import TypeAlias, assert_never, final

from safe_payments.domain.payment_methods import PaymentMethod
from safe_payments.domain.scalars import PositiveAmount


class PaymentStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    VOID = "VOID"
    REFUNDED = "REFUNDED"


@final
@dataclass(frozen=True, slots=True)
class PendingPayment:
    amount: PositiveAmount
    method: PaymentMethod


@final
@dataclass(frozen=True, slots=True)
class PaidPayment:
    amount: PositiveAmount
    method: PaymentMethod
    paid_at: datetime


@final
@dataclass(frozen=True, slots=True)
class VoidPayment:
    amount: PositiveAmount
    method: PaymentMethod
    voided_at: datetime


@final
@dataclass(frozen=True, slots=True)
class RefundedPayment:
    amount: PositiveAmount
    method: PaymentMethod
    refunded_at: datetime


Payment: TypeAlias = PendingPayment | PaidPayment | VoidPayment | RefundedPayment


def transition_to_paid(payment: PendingPayment, paid_at: datetime | None = None) -> PaidPayment:
    return PaidPayment(
        amount=payment.amount,
        method=payment.method,
        paid_at=paid_at or datetime.now(UTC),
    )


def transition_to_void(payment: PendingPayment, voided_at: datetime | None = None) -> VoidPayment:
    return VoidPayment(
        amount=payment.amount,
        method=payment.method,
        voided_at=voided_at or datetime.now(UTC),
    )


def transition_to_refunded(payment: PaidPayment, refunded_at: datetime | None = None) -> RefundedPayment:
    return RefundedPayment(
        amount=payment.amount,
        method=payment.method,
        refunded_at=refunded_at or datetime.now(UTC),
    )


def payment_status(payment: Payment) -> PaymentStatus:
    match payment:
        case PendingPayment():
            return PaymentStatus.PENDING
        case PaidPayment():
            return PaymentStatus.PAID
        case VoidPayment():
            return PaymentStatus.VOID
        case RefundedPayment():
            return PaymentStatus.REFUNDED
        case _:
            assert_never(payment)
