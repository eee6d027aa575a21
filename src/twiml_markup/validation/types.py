"""Result types for document validation.

Errors are terminal: a validation call reports at most one. Warnings
accumulate in document order and never abort a lenient validation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

from twiml_markup.shared import DocumentValidationError


class ValidationErrorType(Enum):
    """Kinds of hard validation failures."""

    MALFORMED_XML = "Malformed XML"
    MISSING_DECLARATION = "Missing Declaration"
    MISSING_ROOT = "Missing Root"
    INVALID_URL = "Invalid URL"
    INVALID_PHONE_NUMBER = "Invalid Phone Number"
    CONTENT_TOO_LONG = "Content Too Long"
    STRICT_WARNINGS = "Warnings In Strict Mode"


class WarningType(Enum):
    """Kinds of non-fatal findings."""

    UNREACHABLE_VERBS = "unreachable_verbs"
    MEDIA_LIMIT_EXCEEDED = "media_limit_exceeded"
    EMPTY_REDIRECT_URL = "empty_redirect_url"


@dataclass(frozen=True)
class ValidationWarning:
    """Single non-fatal finding."""

    message: str
    warning_type: Optional[WarningType] = None
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("Validation warning message cannot be empty")

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError:
    """The single constraint violation that ended a validation call."""

    kind: ValidationErrorType
    message: str
    field: Optional[str] = None
    value: Optional[str] = None
    limit: Optional[int] = None
    actual: Optional[int] = None
    element_path: Optional[str] = None
    warnings: Tuple[ValidationWarning, ...] = ()

    def __str__(self) -> str:
        context = self.element_path or self.field
        if context:
            return f"[{context}] {self.kind.value}: {self.message}"
        return f"{self.kind.value}: {self.message}"

    @classmethod
    def malformed_xml(cls, detail: str) -> "ValidationError":
        return cls(ValidationErrorType.MALFORMED_XML, detail)

    @classmethod
    def missing_declaration(cls) -> "ValidationError":
        return cls(
            ValidationErrorType.MISSING_DECLARATION,
            "XML declaration missing or not at the start of the document",
        )

    @classmethod
    def missing_root(cls, expected: str, found: str) -> "ValidationError":
        return cls(
            ValidationErrorType.MISSING_ROOT,
            f"Expected root element <{expected}>, found <{found}>",
            value=found,
        )

    @classmethod
    def invalid_url(
        cls, field_name: str, value: str, element_path: Optional[str] = None
    ) -> "ValidationError":
        return cls(
            ValidationErrorType.INVALID_URL,
            f"URL should start with http://, https://, or /: {value}",
            field=field_name,
            value=value,
            element_path=element_path,
        )

    @classmethod
    def invalid_phone_number(
        cls, field_name: str, value: str, element_path: Optional[str] = None
    ) -> "ValidationError":
        return cls(
            ValidationErrorType.INVALID_PHONE_NUMBER,
            f"Phone number should start with +: {value}",
            field=field_name,
            value=value,
            element_path=element_path,
        )

    @classmethod
    def content_too_long(
        cls,
        field_name: str,
        limit: int,
        actual: int,
        element_path: Optional[str] = None,
    ) -> "ValidationError":
        return cls(
            ValidationErrorType.CONTENT_TOO_LONG,
            f"{field_name} content exceeds {limit} characters: {actual} characters",
            field=field_name,
            limit=limit,
            actual=actual,
            element_path=element_path,
        )

    @classmethod
    def strict_warnings(cls, warnings: List[ValidationWarning]) -> "ValidationError":
        details = "; ".join(w.message for w in warnings)
        return cls(
            ValidationErrorType.STRICT_WARNINGS,
            f"{len(warnings)} warning(s) escalated in strict mode: {details}",
            warnings=tuple(warnings),
        )


@dataclass
class ValidationResult:
    """Outcome of one validation call.

    Unpacks as ``warnings, error = result``.
    """

    warnings: List[ValidationWarning] = field(default_factory=list)
    error: Optional[ValidationError] = None
    strict: bool = False
    elements_validated: int = 0
    processing_time_ms: float = 0.0

    def __iter__(self) -> Iterator[Union[List[ValidationWarning], Optional[ValidationError]]]:
        yield self.warnings
        yield self.error

    @property
    def is_valid(self) -> bool:
        """True when no error was reported."""
        return self.error is None

    @property
    def has_warnings(self) -> bool:
        """Check if there are validation warnings."""
        return len(self.warnings) > 0

    @property
    def messages(self) -> List[str]:
        """Warning messages in the order they were found."""
        return [warning.message for warning in self.warnings]

    def raise_for_error(self) -> None:
        """Raise ``DocumentValidationError`` if validation failed."""
        if self.error is not None:
            raise DocumentValidationError(self.error)

    def summary(self) -> str:
        """Get validation summary."""
        if self.is_valid:
            warning_text = f" ({len(self.warnings)} warnings)" if self.warnings else ""
            return f"Validation passed{warning_text}"
        return f"Validation failed: {self.error}"
