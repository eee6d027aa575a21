"""Shared utilities for markup construction and validation.

This module provides configuration objects, the exception hierarchy and
correlation-aware logging used across the markup, validation and response
layers.
"""

from .config import (
    DEFAULT_MAX_BODY_LENGTH,
    DEFAULT_MAX_MEDIA_PER_MESSAGE,
    DEFAULT_MAX_SAY_LENGTH,
    SerializerConfig,
    TwiMLConfig,
    ValidationConfig,
)
from .exceptions import (
    ConfigError,
    ConfigValidationError,
    DocumentValidationError,
    InvalidParameterError,
    TwiMLError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "DEFAULT_MAX_BODY_LENGTH",
    "DEFAULT_MAX_MEDIA_PER_MESSAGE",
    "DEFAULT_MAX_SAY_LENGTH",
    "SerializerConfig",
    "TwiMLConfig",
    "ValidationConfig",
    "ConfigError",
    "ConfigValidationError",
    "DocumentValidationError",
    "InvalidParameterError",
    "TwiMLError",
    "CorrelationLogger",
    "get_logger",
]
