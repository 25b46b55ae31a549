from safe_payments.domain.errors import ValidationErrors


class DomainError(Exception):
    """Base exception for domain errors."""


class ValidationFailed(DomainError):
    """Raised by the fail-fast constructors when a field does not validate."""

    def __init__(self, errors: ValidationErrors) -> None:
        self.errors = errors
        messages = "; ".join(error.message for error in errors)
        super().__init__(f"Validation failed: {messages}")


class EmptyErrorListError(DomainError):
    """Raised when a failure is built without any validation error."""

    def __init__(self) -> None:
        super().__init__("A validation failure must carry at least one error")
