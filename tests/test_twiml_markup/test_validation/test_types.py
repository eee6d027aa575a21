"""Tests for validation result types."""

import pytest

from twiml_markup.shared import DocumentValidationError
from twiml_markup.validation.types import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    ValidationWarning,
    WarningType,
)


class TestValidationWarning:
    """Test suite for ValidationWarning."""

    def test_str_is_message(self) -> None:
        """Test string conversion."""
        warning = ValidationWarning("Warning: x", WarningType.UNREACHABLE_VERBS, 0)

        assert str(warning) == "Warning: x"
        assert warning.index == 0

    def test_empty_message_rejected(self) -> None:
        """Test that warnings need a message."""
        with pytest.raises(ValueError, match="cannot be empty"):
            ValidationWarning("")


class TestValidationError:
    """Test suite for ValidationError factories."""

    def test_content_too_long(self) -> None:
        """Test limit and actual length are recorded."""
        error = ValidationError.content_too_long("Say", 4096, 4097, "/Response/Say")

        assert error.kind is ValidationErrorType.CONTENT_TOO_LONG
        assert error.limit == 4096
        assert error.actual == 4097
        assert str(error) == (
            "[/Response/Say] Content Too Long: "
            "Say content exceeds 4096 characters: 4097 characters"
        )

    def test_invalid_url(self) -> None:
        """Test URL errors carry field and value."""
        error = ValidationError.invalid_url("action", "ftp://x")

        assert error.kind is ValidationErrorType.INVALID_URL
        assert error.field == "action"
        assert error.value == "ftp://x"
        assert str(error).startswith("[action] Invalid URL:")

    def test_invalid_phone_number(self) -> None:
        """Test phone errors carry field and value."""
        error = ValidationError.invalid_phone_number("to", "5551234")

        assert error.kind is ValidationErrorType.INVALID_PHONE_NUMBER
        assert "5551234" in error.message

    def test_structural_errors(self) -> None:
        """Test structural factory messages."""
        assert ValidationError.missing_declaration().kind is (
            ValidationErrorType.MISSING_DECLARATION
        )
        missing_root = ValidationError.missing_root("Response", "Reply")
        assert missing_root.value == "Reply"
        assert str(missing_root) == (
            "Missing Root: Expected root element <Response>, found <Reply>"
        )

    def test_strict_warnings_keeps_warnings(self) -> None:
        """Test escalation keeps the escalated warnings."""
        warnings = [ValidationWarning("first"), ValidationWarning("second")]

        error = ValidationError.strict_warnings(warnings)

        assert error.kind is ValidationErrorType.STRICT_WARNINGS
        assert error.warnings == tuple(warnings)
        assert "first; second" in error.message


class TestValidationResult:
    """Test suite for ValidationResult."""

    def test_unpacks_as_pair(self) -> None:
        """Test tuple-style unpacking."""
        result = ValidationResult(warnings=[ValidationWarning("w")])

        warnings, error = result

        assert warnings == [ValidationWarning("w")]
        assert error is None

    def test_passed_summary(self) -> None:
        """Test summary for a passing result."""
        assert ValidationResult().summary() == "Validation passed"
        result = ValidationResult(warnings=[ValidationWarning("w")])
        assert result.summary() == "Validation passed (1 warnings)"
        assert result.has_warnings
        assert result.messages == ["w"]

    def test_raise_for_error(self) -> None:
        """Test that failed results raise and passing results do not."""
        ValidationResult().raise_for_error()

        error = ValidationError.missing_declaration()
        result = ValidationResult(error=error)

        assert not result.is_valid
        assert result.summary().startswith("Validation failed: Missing Declaration")
        with pytest.raises(DocumentValidationError) as exc_info:
            result.raise_for_error()
        assert exc_info.value.error is error
