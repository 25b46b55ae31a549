"""Validation error values.

Errors are plain immutable values, never raised. Each one names the field it
belongs to, the rule that failed and a human-readable message. The error kinds
form a closed union so callers can match on them exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias, final


class ErrorKind(Enum):
    SHAPE = "SHAPE"
    RANGE = "RANGE"
    CHECKSUM = "CHECKSUM"
    TEMPORAL = "TEMPORAL"
    COMPOSITION = "COMPOSITION"


class Rule(Enum):
    NOT_TEXT = "NOT_TEXT"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NOT_A_DATE = "NOT_A_DATE"
    EMPTY = "EMPTY"
    TOO_SHORT = "TOO_SHORT"
    NON_DIGIT = "NON_DIGIT"
    EXCEEDS_MAX_LENGTH = "EXCEEDS_MAX_LENGTH"
    BELOW_MIN_LENGTH = "BELOW_MIN_LENGTH"
    WRONG_LENGTH = "WRONG_LENGTH"
    INVALID_EMAIL = "INVALID_EMAIL"
    NOT_POSITIVE = "NOT_POSITIVE"
    NEGATIVE = "NEGATIVE"
    INVALID_MONTH = "INVALID_MONTH"
    LUHN = "LUHN"
    ABA = "ABA"
    PAST_EXPIRY = "PAST_EXPIRY"
    NOT_AFTER = "NOT_AFTER"
    MISSING_UPPERCASE = "MISSING_UPPERCASE"
    MISSING_LOWERCASE = "MISSING_LOWERCASE"
    MISSING_DIGIT = "MISSING_DIGIT"
    MISSING_SYMBOL = "MISSING_SYMBOL"


@final
@dataclass(frozen=True, slots=True)
class ShapeError:
    """Wrong primitive shape: empty, non-digit, wrong length, not text."""

    field_name: str
    rule: Rule
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.SHAPE


@final
@dataclass(frozen=True, slots=True)
class RangeError:
    """Numeric value outside its allowed range."""

    field_name: str
    rule: Rule
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.RANGE


@final
@dataclass(frozen=True, slots=True)
class ChecksumError:
    """Well-formed digits that fail a Luhn or ABA checksum."""

    field_name: str
    rule: Rule
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.CHECKSUM


@final
@dataclass(frozen=True, slots=True)
class TemporalError:
    """Date or month that does not satisfy a temporal constraint."""

    field_name: str
    rule: Rule
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.TEMPORAL


@final
@dataclass(frozen=True, slots=True)
class CompositionError:
    """A composite requirement, such as password character classes."""

    field_name: str
    rule: Rule
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.COMPOSITION


ValidationError: TypeAlias = ShapeError | RangeError | ChecksumError | TemporalError | CompositionError

# Non-empty, in rule evaluation order.
ValidationErrors: TypeAlias = tuple[ValidationError, ...]
