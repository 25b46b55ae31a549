"""Result values and the error-accumulation protocol.

A validation step produces either ``Ok(value)`` or ``Err(errors)``. Steps are
combined with :func:`zip_or_accumulate`, which never short-circuits: every
step is evaluated, and the combined value is only built when all of them
succeeded. Otherwise the errors of every failing step are concatenated in
step order.

Fail-fast steps (callables that raise :class:`ValidationFailed`) are combined
the same way with :func:`accumulate`; raising only stops the step that raised.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeAlias, TypeVar, final

from safe_payments.domain.errors import ValidationError, ValidationErrors
from safe_payments.domain.exceptions import EmptyErrorListError, ValidationFailed


T = TypeVar("T")
U = TypeVar("U")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err:
    errors: ValidationErrors

    def __post_init__(self) -> None:
        if not self.errors:
            raise EmptyErrorListError()

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValidationFailed(self.errors)

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, fn: Callable[[Any], Any]) -> Err:
        return self


Result: TypeAlias = Ok[T] | Err


class Rules:
    """Collects the rule violations of a single field in evaluation order."""

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def check(self, condition: bool, error: Callable[[], ValidationError]) -> bool:
        """Record ``error()`` unless ``condition`` holds. Returns ``condition``."""
        if not condition:
            self._errors.append(error())
        return condition

    def fail(self, error: ValidationError) -> None:
        self._errors.append(error)

    @property
    def passed(self) -> bool:
        return not self._errors

    def reject(self) -> Err:
        return Err(tuple(self._errors))

    def build(self, factory: Callable[[], T]) -> Result[T]:
        if self._errors:
            return Err(tuple(self._errors))
        return Ok(factory())


def zip_or_accumulate(*results: Result[Any], combine: Callable[..., T]) -> Result[T]:
    """Combine already-evaluated results.

    Returns ``Ok(combine(*values))`` when every result is ``Ok``. Otherwise
    returns one ``Err`` holding the errors of every failing result, in the
    order the results were given; ``combine`` is not called.
    """
    values: list[Any] = []
    errors: list[ValidationError] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err(step_errors):
                errors.extend(step_errors)
    if errors:
        return Err(tuple(errors))
    return Ok(combine(*values))


def attempt(step: Callable[[], T]) -> Result[T]:
    """Run a fail-fast step and capture its ``ValidationFailed`` as an ``Err``."""
    try:
        return Ok(step())
    except ValidationFailed as exc:
        return Err(exc.errors)


def accumulate(*steps: Callable[[], Any], combine: Callable[..., T]) -> Result[T]:
    """Like :func:`zip_or_accumulate`, for steps that raise instead of returning ``Err``.

    Every step runs, even after an earlier one raised.
    """
    return zip_or_accumulate(*(attempt(step) for step in steps), combine=combine)

