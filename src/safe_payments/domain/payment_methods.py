"""Payment instruments.

``CreditCard`` and ``Check`` are composites: their ``create`` factories run
every field validation and merge the failures, so one call reports every
invalid field.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from enum import Enum
from typing import TypeAlias, assert_never, final

from safe_payments.domain._construction import CONSTRUCTION_KEY, ensure_factory_built
from safe_payments.domain.result import Result, zip_or_accumulate
from safe_payments.domain.scalars import ChecksumString, DigitString, ExpiryDate, RoutingNumber, YearMonth


CARD_NUMBER_MAX_LENGTH = 19
CVV_MIN_LENGTH = 3
CVV_MAX_LENGTH = 4


class PaymentMethodType(Enum):
    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    CHECK = "CHECK"


@final
@dataclass(frozen=True, slots=True)
class Cash:
    pass


CASH = Cash()


@final
@dataclass(frozen=True, slots=True)
class CreditCard:
    number: ChecksumString
    expiry: ExpiryDate
    cvv: DigitString
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(
        cls,
        number: str,
        expiry_month: int,
        expiry_year: int,
        cvv: str,
        *,
        now: YearMonth | None = None,
    ) -> Result[CreditCard]:
        return zip_or_accumulate(
            ChecksumString.create(number, "card number", max_length=CARD_NUMBER_MAX_LENGTH),
            ExpiryDate.create(expiry_month, expiry_year, "expiry date", now=now),
            DigitString.create(cvv, "CVV", min_length=CVV_MIN_LENGTH, max_length=CVV_MAX_LENGTH),
            combine=lambda card_number, expiry, cvv_code: cls(card_number, expiry, cvv_code, CONSTRUCTION_KEY),
        )

    @property
    def last4(self) -> str:
        return self.number.value[-4:]

    @property
    def masked_number(self) -> str:
        return "*" * (len(self.number.value) - 4) + self.last4


@final
@dataclass(frozen=True, slots=True)
class Check:
    routing_number: RoutingNumber
    account_number: DigitString
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, routing_number: str, account_number: str) -> Result[Check]:
        return zip_or_accumulate(
            RoutingNumber.create(routing_number, "routing number"),
            DigitString.create(account_number, "account number"),
            combine=lambda routing, account: cls(routing, account, CONSTRUCTION_KEY),
        )


PaymentMethod: TypeAlias = Cash | CreditCard | Check


def method_type(method: PaymentMethod) -> PaymentMethodType:
    match method:
        case Cash():
            return PaymentMethodType.CASH
        case CreditCard():
            return PaymentMethodType.CREDIT_CARD
        case Check():
            return PaymentMethodType.CHECK
        case _:
            assert_never(method)
