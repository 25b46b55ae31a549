"""Validated scalar types.

Each type wraps one primitive and guarantees one invariant. Instances can only
be obtained through the ``create`` classmethod, which returns ``Ok(instance)``
or ``Err(errors)`` listing every rule the input broke. ``create(...).unwrap()``
is the fail-fast form. ``.value`` projects back to the primitive.
"""

from __future__ import annotations

import math
from dataclasses import InitVar, dataclass, field
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import TYPE_CHECKING, Generic, TypeVar, final

from safe_payments.domain._construction import CONSTRUCTION_KEY, ensure_factory_built
from safe_payments.domain.checksums import aba_valid, luhn_valid
from safe_payments.domain.errors import (
    ChecksumError,
    CompositionError,
    RangeError,
    Rule,
    ShapeError,
    TemporalError,
)
from safe_payments.domain.result import Result, Rules


if TYPE_CHECKING:
    from safe_payments.config import Settings


N = TypeVar("N", int, float, Decimal)

ROUTING_NUMBER_LENGTH = 9


def _is_number(raw: object) -> bool:
    return isinstance(raw, (Real, Decimal)) and not isinstance(raw, bool)


def _is_nan(raw: object) -> bool:
    if isinstance(raw, Decimal):
        return raw.is_nan()
    return isinstance(raw, float) and math.isnan(raw)


def _is_whole_number(raw: object) -> bool:
    return isinstance(raw, int) and not isinstance(raw, bool)


def _normalize_digits(raw: str) -> str:
    return raw.strip().replace(" ", "")


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and all(char.isdigit() for char in text)


def _as_text(rules: Rules, raw: object, field_name: str) -> str | None:
    if isinstance(raw, str):
        return raw
    rules.fail(ShapeError(field_name, Rule.NOT_TEXT, f"{field_name} must be text"))
    return None


def _digit_rules(
    rules: Rules,
    normalized: str,
    field_name: str,
    min_length: int | None,
    max_length: int | None,
) -> None:
    rules.check(
        _is_ascii_digits(normalized),
        lambda: ShapeError(field_name, Rule.NON_DIGIT, f"{field_name} must contain only digits (spaces allowed)"),
    )
    rules.check(
        bool(normalized),
        lambda: ShapeError(field_name, Rule.EMPTY, f"{field_name} must not be empty"),
    )
    if max_length is not None:
        rules.check(
            len(normalized) <= max_length,
            lambda: ShapeError(field_name, Rule.EXCEEDS_MAX_LENGTH, f"{field_name} must be at most {max_length} digits"),
        )
    if min_length is not None:
        rules.check(
            len(normalized) >= min_length,
            lambda: ShapeError(field_name, Rule.BELOW_MIN_LENGTH, f"{field_name} must be at least {min_length} digits"),
        )


@final
@dataclass(frozen=True, slots=True)
class NonEmptyString:
    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, raw: object, field_name: str = "value", *, min_length: int = 1) -> Result[NonEmptyString]:
        rules = Rules()
        text = _as_text(rules, raw, field_name)
        if text is None:
            return rules.reject()
        trimmed = text.strip()
        rules.check(
            len(trimmed) >= min_length,
            lambda: ShapeError(field_name, Rule.TOO_SHORT, f"{field_name} must be at least {min_length} characters long"),
        )
        return rules.build(lambda: cls(trimmed, CONSTRUCTION_KEY))


@final
@dataclass(frozen=True, slots=True)
class PositiveNumber(Generic[N]):
    value: N
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, raw: N, field_name: str = "value") -> Result[PositiveNumber[N]]:
        rules = Rules()
        if rules.check(
            _is_number(raw) and not _is_nan(raw),
            lambda: ShapeError(field_name, Rule.NOT_A_NUMBER, f"{field_name} must be a number"),
        ):
            rules.check(
                raw > 0,
                lambda: RangeError(field_name, Rule.NOT_POSITIVE, f"{field_name} must be a positive number (> 0)"),
            )
        return rules.build(lambda: cls(raw, CONSTRUCTION_KEY))


@final
@dataclass(frozen=True, slots=True)
class NonNegativeNumber(Generic[N]):
    value: N
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, raw: N, field_name: str = "value") -> Result[NonNegativeNumber[N]]:
        rules = Rules()
        if rules.check(
            _is_number(raw) and not _is_nan(raw),
            lambda: ShapeError(field_name, Rule.NOT_A_NUMBER, f"{field_name} must be a number"),
        ):
            rules.check(
                raw >= 0,
                lambda: RangeError(field_name, Rule.NEGATIVE, f"{field_name} must be a non-negative number (>= 0)"),
            )
        return rules.build(lambda: cls(raw, CONSTRUCTION_KEY))


def _to_decimal(raw: object) -> Decimal | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        amount = raw
    elif isinstance(raw, int):
        amount = Decimal(raw)
    elif isinstance(raw, float):
        amount = Decimal(str(raw))
    elif isinstance(raw, str):
        try:
            amount = Decimal(raw.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return amount if amount.is_finite() else None


@final
@dataclass(frozen=True, slots=True)
class PositiveAmount:
    """A strictly positive currency amount.

    Floats are converted through ``str`` so ``99.99`` becomes ``Decimal("99.99")``
    rather than its binary approximation.
    """

    value: Decimal
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, raw: Decimal | int | float | str, field_name: str = "amount") -> Result[PositiveAmount]:
        rules = Rules()
        amount = _to_decimal(raw)
        if amount is None:
            rules.fail(ShapeError(field_name, Rule.NOT_A_NUMBER, f"{field_name} must be a decimal amount"))
            return rules.reject()
        rules.check(
            amount > 0,
            lambda: RangeError(field_name, Rule.NOT_POSITIVE, f"{field_name} must be a positive amount (> 0)"),
        )
        return rules.build(lambda: cls(amount, CONSTRUCTION_KEY))


@final
@dataclass(frozen=True, slots=True)
class DigitString:
    """Digits only, with spaces stripped.

    Non-digit, empty and length rules are independent, so ``"12a45"`` with
    ``max_length=3`` reports two errors.
    """

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(
        cls,
        raw: object,
        field_name: str = "value",
        *,
        min_length: int | None = None,
        max_length: int | None = None,
    ) -> Result[DigitString]:
        rules = Rules()
        text = _as_text(rules, raw, field_name)
        if text is None:
            return rules.reject()
        normalized = _normalize_digits(text)
        _digit_rules(rules, normalized, field_name, min_length, max_length)
        return rules.build(lambda: cls(normalized, CONSTRUCTION_KEY))


@final
@dataclass(frozen=True, slots=True)
class ChecksumString:
    """Digit string that passes the MOD10 (Luhn) checksum.

    The checksum is only computed once every shape rule has passed.
    """

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(
        cls,
        raw: object,
        field_name: str = "card number",
        *,
        min_length: int | None = None,
        max_length: int | None = None,
    ) -> Result[ChecksumString]:
        rules = Rules()
        text = _as_text(rules, raw, field_name)
        if text is None:
            return rules.reject()
        normalized = _normalize_digits(text)
        _digit_rules(rules, normalized, field_name, min_length, max_length)
        if rules.passed:
            rules.check(
                luhn_valid(normalized),
                lambda: ChecksumError(field_name, Rule.LUHN, f"{field_name} failed MOD10 (Luhn) checksum"),
            )
        return rules.build(lambda: cls(normalized, CONSTRUCTION_KEY))


@final
@dataclass(frozen=True, slots=True)
class RoutingNumber:
    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, raw: object, field_name: str = "routing number") -> Result[RoutingNumber]:
        rules = Rules()
        text = _as_text(rules, raw, field_name)
        if text is None:
            return rules.reject()
        normalized = _normalize_digits(text)
        digits = rules.check(
            _is_ascii_digits(normalized),
            lambda: ShapeError(field_name, Rule.NON_DIGIT, f"{field_name} must contain only digits (spaces allowed)"),
        )
        correct_length = rules.check(
            len(normalized) == ROUTING_NUMBER_LENGTH,
            lambda: ShapeError(
                field_name, Rule.WRONG_LENGTH, f"{field_name} must be exactly {ROUTING_NUMBER_LENGTH} digits long"
            ),
        )
        if digits and correct_length:
            rules.check(
                aba_valid(normalized),
                lambda: ChecksumError(field_name, Rule.ABA, f"{field_name} failed ABA routing checksum"),
            )
        return rules.build(lambda: cls(normalized, CONSTRUCTION_KEY))


@dataclass(frozen=True, order=True, slots=True)
class YearMonth:
    year: int
    month: int

    @classmethod
    def from_date(cls, value: date) -> YearMonth:
        return cls(value.year, value.month)

    @classmethod
    def current(cls) -> YearMonth:
        return cls.from_date(datetime.now(UTC))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@final
@dataclass(frozen=True, slots=True)
class ExpiryDate:
    """Card expiry month that is not in the past.

    An out-of-range month does not stop the past-date rule: it is evaluated
    with January of the same year so both problems are reported.
    """

    value: YearMonth
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def year(self) -> int:
        return self.value.year

    @classmethod
    def create(
        cls,
        month: int,
        year: int,
        field_name: str = "expiry date",
        *,
        now: YearMonth | None = None,
    ) -> Result[ExpiryDate]:
        reference = now or YearMonth.current()
        rules = Rules()
        month_is_int = rules.check(
            _is_whole_number(month),
            lambda: ShapeError(field_name, Rule.NOT_A_NUMBER, f"{field_name} month must be a whole number"),
        )
        year_is_int = rules.check(
            _is_whole_number(year),
            lambda: ShapeError(field_name, Rule.NOT_A_NUMBER, f"{field_name} year must be a whole number"),
        )
        month_in_range = month_is_int and rules.check(
            1 <= month <= 12,
            lambda: RangeError(field_name, Rule.INVALID_MONTH, f"{field_name} month must be between 1 and 12 (was {month})"),
        )
        if year_is_int:
            probe = YearMonth(year, month if month_in_range else 1)
            rules.check(
                probe >= reference,
                lambda: TemporalError(
                    field_name, Rule.PAST_EXPIRY, f"{field_name} must not be in the past (now is {reference})"
                ),
            )
        return rules.build(lambda: cls(YearMonth(year, month), CONSTRUCTION_KEY))

    @classmethod
    def from_year_month(
        cls,
        value: YearMonth,
        field_name: str = "expiry date",
        *,
        now: YearMonth | None = None,
    ) -> Result[ExpiryDate]:
        return cls.create(value.month, value.year, field_name, now=now)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


@final
@dataclass(frozen=True, slots=True)
class FutureDate:
    value: date
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, raw: date, field_name: str = "date", *, after: date | None = None) -> Result[FutureDate]:
        reference = _as_date(after) if after is not None else datetime.now(UTC).date()
        rules = Rules()
        if rules.check(
            isinstance(raw, date),
            lambda: ShapeError(field_name, Rule.NOT_A_DATE, f"{field_name} must be a date"),
        ):
            rules.check(
                _as_date(raw) > reference,
                lambda: TemporalError(field_name, Rule.NOT_AFTER, f"{field_name} must be after {reference.isoformat()}"),
            )
        return rules.build(lambda: cls(_as_date(raw), CONSTRUCTION_KEY))


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    min_length: int = 12
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_symbol: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> PasswordPolicy:
        return cls(
            min_length=settings.password_min_length,
            require_upper=settings.password_require_upper,
            require_lower=settings.password_require_lower,
            require_digit=settings.password_require_digit,
            require_symbol=settings.password_require_symbol,
        )


DEFAULT_PASSWORD_POLICY = PasswordPolicy()


@final
@dataclass(frozen=True, slots=True)
class StrongPassword:
    value: str = field(repr=False)
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(
        cls,
        raw: object,
        field_name: str = "password",
        *,
        policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
    ) -> Result[StrongPassword]:
        rules = Rules()
        text = _as_text(rules, raw, field_name)
        if text is None:
            return rules.reject()
        rules.check(
            bool(text) and len(text) >= policy.min_length,
            lambda: ShapeError(
                field_name, Rule.TOO_SHORT, f"{field_name} must be at least {policy.min_length} characters long"
            ),
        )
        if policy.require_upper:
            rules.check(
                any(char.isupper() for char in text),
                lambda: CompositionError(
                    field_name, Rule.MISSING_UPPERCASE, f"{field_name} must contain at least one uppercase letter"
                ),
            )
        if policy.require_lower:
            rules.check(
                any(char.islower() for char in text),
                lambda: CompositionError(
                    field_name, Rule.MISSING_LOWERCASE, f"{field_name} must contain at least one lowercase letter"
                ),
            )
        if policy.require_digit:
            rules.check(
                any(char.isdigit() for char in text),
                lambda: CompositionError(field_name, Rule.MISSING_DIGIT, f"{field_name} must contain at least one digit"),
            )
        if policy.require_symbol:
            rules.check(
                any(not char.isalnum() for char in text),
                lambda: CompositionError(field_name, Rule.MISSING_SYMBOL, f"{field_name} must contain at least one symbol"),
            )
        return rules.build(lambda: cls(text, CONSTRUCTION_KEY))


@final
@dataclass(frozen=True, slots=True)
class EmailAddress:
    """Trimmed, non-blank text containing ``@``. Deliberately no stricter."""

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory_built(self, _key)

    @classmethod
    def create(cls, raw: object, field_name: str = "email") -> Result[EmailAddress]:
        rules = Rules()
        text = _as_text(rules, raw, field_name)
        if text is None:
            return rules.reject()
        trimmed = text.strip()
        rules.check(
            bool(trimmed) and "@" in trimmed,
            lambda: ShapeError(field_name, Rule.INVALID_EMAIL, f"{field_name} must be a valid email address"),
        )
        return rules.build(lambda: cls(trimmed, CONSTRUCTION_KEY))
