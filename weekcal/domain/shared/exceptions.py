"""
Domain Exceptions

Defines custom exceptions for calendar-week errors with discriminated error types.
These exceptions represent rejected inputs and invalid week-numbering conventions.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when domain validation rules are violated."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"

        full_message = f"Validation failed for field '{field_name}': {message}"
        details = details or {}
        details.update(
            {
                "field": field_name,
                "value": str(value) if value is not None else None,
                "error_code": self.error_code,
            }
        )

        super().__init__(full_message, ErrorType.VALIDATION, details)

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary."""
        return {
            "type": self.error_type.value,
            "field": self.field_name,
            "value": str(self.value) if self.value is not None else None,
            "message": self.message,
            "error_code": self.error_code,
        }


class OutOfRangeError(ValidationError, ValueError):
    """Raised when a year or week lies outside what the convention allows."""

    def __init__(
        self,
        parameter_name: str,
        value: int,
        message: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(parameter_name, value, message, "OUT_OF_RANGE", details)

    @property
    def parameter_name(self) -> str:
        """Name of the rejected constructor argument ("year" or "week")."""
        return self.field_name


class InvalidConventionError(DomainError, ValueError):
    """Raised when a week convention is built without a calendar or rule."""

    def __init__(self, field_name: str, value: object) -> None:
        self.field_name = field_name
        self.value = value
        details: dict[str, str | int | bool | None] = {
            "field": field_name,
            "value": repr(value),
        }
        super().__init__(
            f"Invalid week convention: {field_name}={value!r}",
            ErrorType.CONFIGURATION,
            details,
        )
