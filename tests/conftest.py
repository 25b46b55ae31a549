"""Shared pytest fixtures and helpers for safe-payments tests."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

import pytest

from safe_payments.application.clock import FixedClock
from safe_payments.domain.errors import ValidationErrors
from safe_payments.domain.payment import PendingPayment
from safe_payments.domain.payment_methods import CreditCard
from safe_payments.domain.result import Err, Ok, Result
from safe_payments.domain.scalars import PositiveAmount, YearMonth


VALID_CARD_NUMBER = "4532015112830366"
INVALID_LUHN_CARD_NUMBER = "4532015112830367"
VALID_ROUTING_NUMBER = "021000021"
INVALID_ROUTING_NUMBER = "021000022"


def unwrap_ok(result: Result[Any]) -> Any:
    """Return the value of an Ok, failing the test on Err."""
    match result:
        case Ok(value):
            return value
        case Err(errors):
            pytest.fail(f"expected Ok, got errors: {[error.message for error in errors]}")


def unwrap_err(result: Result[Any]) -> ValidationErrors:
    """Return the errors of an Err, failing the test on Ok."""
    match result:
        case Err(errors):
            return errors
        case Ok(value):
            pytest.fail(f"expected Err, got value: {value!r}")


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 8, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(fixed_time: datetime) -> FixedClock:
    return FixedClock(fixed_time)


@pytest.fixture
def this_month(fixed_time: datetime) -> YearMonth:
    return YearMonth.from_date(fixed_time)


@pytest.fixture
def credit_card(this_month: YearMonth) -> CreditCard:
    return unwrap_ok(CreditCard.create(VALID_CARD_NUMBER, 12, 2026, "123", now=this_month))


@pytest.fixture
def amount() -> PositiveAmount:
    return unwrap_ok(PositiveAmount.create(Decimal("99.99")))


@pytest.fixture
def pending_payment(amount: PositiveAmount, credit_card: CreditCard) -> PendingPayment:
    return PendingPayment(amount=amount, method=credit_card)
