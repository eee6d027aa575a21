"""Exception hierarchy for markup construction and validation."""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from twiml_markup.validation.types import ValidationError


class TwiMLError(Exception):
    """Base exception for all markup errors."""


class InvalidParameterError(TwiMLError, ValueError):
    """A builder was called with a value the vocabulary does not allow."""

    def __init__(self, param: str, reason: str) -> None:
        self.param = param
        self.reason = reason
        super().__init__(f"Invalid parameter '{param}': {reason}")


class DocumentValidationError(TwiMLError):
    """Raised by ``ValidationResult.raise_for_error`` for a failed validation."""

    def __init__(self, error: "ValidationError") -> None:
        self.error = error
        super().__init__(f"TwiML validation failed: {error}")


class ConfigError(TwiMLError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []
