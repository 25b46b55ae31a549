from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta

from safe_payments.domain.scalars import YearMonth


class Clock(ABC):
    """Source of "now" for transitions and card expiry checks."""

    @abstractmethod
    def now(self) -> datetime: ...

    def current_month(self) -> YearMonth:
        return YearMonth.from_date(self.now())


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock(Clock):
    """Clock that only moves when advanced, for deterministic payment timestamps."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is not UTC:
            raise ValueError(f"FixedClock needs a UTC instant, got tzinfo={instant.tzinfo}")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> datetime:
        if delta < timedelta(0):
            raise ValueError("FixedClock cannot move backwards")
        self._instant += delta
        return self._instant
