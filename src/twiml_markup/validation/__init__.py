"""Validation of rendered markup documents.

Key Components:
    TwiMLValidator: Well-formedness, structural, semantic and logic passes
    ValidationResult: Warnings plus at most one terminal error
    validate / validate_strict: One-call entry points
"""

from .types import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    ValidationWarning,
    WarningType,
)
from .validator import TwiMLValidator, validate, validate_strict

__all__ = [
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "ValidationWarning",
    "WarningType",
    "TwiMLValidator",
    "validate",
    "validate_strict",
]
