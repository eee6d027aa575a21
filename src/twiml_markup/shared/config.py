"""Configuration classes for markup rendering and validation.

This module provides immutable configuration objects for the serializer and
the validator, plus an aggregate ``TwiMLConfig`` that round-trips through
dictionaries and JSON.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from .exceptions import ConfigValidationError

# Platform limits for content carried inside verbs
DEFAULT_MAX_SAY_LENGTH = 4096
DEFAULT_MAX_BODY_LENGTH = 1600
DEFAULT_MAX_MEDIA_PER_MESSAGE = 10

# (tag, attribute names) pairs for attributes that carry phone numbers
DEFAULT_PHONE_ATTRIBUTES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Dial", ("callerId",)),
    ("Message", ("to", "from")),
    ("Sms", ("to", "from")),
)


@dataclass(frozen=True)
class SerializerConfig:
    """Configuration for rendering a document to an XML string."""

    indent: str = "  "
    xml_version: str = "1.0"
    encoding: str = "UTF-8"

    def __post_init__(self) -> None:
        """Validate serializer configuration."""
        if self.indent.strip(" \t"):
            raise ConfigValidationError(
                "indent must contain only spaces or tabs", field_name="indent"
            )
        if not self.xml_version:
            raise ConfigValidationError(
                "xml_version cannot be empty", field_name="xml_version"
            )
        if not self.encoding:
            raise ConfigValidationError(
                "encoding cannot be empty", field_name="encoding"
            )


@dataclass(frozen=True)
class ValidationConfig:
    """Vocabulary constraints checked by the semantic and logic passes."""

    # Length limits (characters of unescaped text)
    max_say_length: int = DEFAULT_MAX_SAY_LENGTH
    max_body_length: int = DEFAULT_MAX_BODY_LENGTH
    max_media_per_message: int = DEFAULT_MAX_MEDIA_PER_MESSAGE

    # Value shape rules
    url_prefixes: Tuple[str, ...] = ("http://", "https://", "/")
    phone_prefixes: Tuple[str, ...] = ("+",)

    # Where URLs and phone numbers live
    url_attributes: Tuple[str, ...] = (
        "action",
        "url",
        "statusCallback",
        "recordingStatusCallback",
        "transcribeCallback",
        "statusCallbackUrl",
        "fallbackUrl",
        "waitUrl",
        "partialResultCallback",
        "referUrl",
    )
    url_content_tags: Tuple[str, ...] = ("Play", "Redirect", "Media")
    phone_attributes: Tuple[Tuple[str, Tuple[str, ...]], ...] = DEFAULT_PHONE_ATTRIBUTES
    phone_content_tags: Tuple[str, ...] = ("Number", "Dial")

    # Elements whose text is length-bounded
    say_tags: Tuple[str, ...] = ("Say",)
    body_tags: Tuple[str, ...] = ("Body", "Sms")
    message_tag: str = "Message"
    media_tag: str = "Media"

    # Top-level verbs after which nothing executes
    terminal_verbs: Tuple[str, ...] = ("Hangup", "Redirect", "Reject")
    redirect_verb: str = "Redirect"

    def __post_init__(self) -> None:
        """Validate limits and vocabulary lists."""
        # A mapping is accepted and stored as pairs so the config stays hashable
        if isinstance(self.phone_attributes, dict):
            object.__setattr__(self, "phone_attributes", tuple(
                (tag, tuple(names)) for tag, names in self.phone_attributes.items()
            ))

        for name in ("max_say_length", "max_body_length", "max_media_per_message"):
            if getattr(self, name) <= 0:
                raise ConfigValidationError(f"{name} must be > 0", field_name=name)
        if not self.url_prefixes:
            raise ConfigValidationError(
                "url_prefixes cannot be empty",
                field_name="url_prefixes",
                suggestions=["Use ('http://', 'https://', '/')"],
            )
        if not self.phone_prefixes:
            raise ConfigValidationError(
                "phone_prefixes cannot be empty",
                field_name="phone_prefixes",
                suggestions=["Use ('+',) for E.164 numbers"],
            )

    def is_url(self, value: str) -> bool:
        """Check a URL-bearing value against the accepted prefixes."""
        return value.startswith(self.url_prefixes)

    def phone_attributes_for(self, tag: str) -> Tuple[str, ...]:
        """Names of the attributes of ``tag`` that carry phone numbers."""
        for name, attributes in self.phone_attributes:
            if name == tag:
                return attributes
        return ()

    def is_phone_number(self, value: str) -> bool:
        """Check a phone-number-bearing value against the accepted prefixes."""
        return value.startswith(self.phone_prefixes)


@dataclass(frozen=True)
class TwiMLConfig:
    """Aggregate configuration shared by serializer and validator.

    Frozen, so a single instance can be shared between threads rendering or
    validating different documents.
    """

    serializer: SerializerConfig = field(default_factory=SerializerConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    correlation_id: Optional[str] = None

    def override(self, **kwargs: Any) -> "TwiMLConfig":
        """Create a new configuration with specific overrides.

        Nested fields use double-underscore notation:

            >>> config = TwiMLConfig().override(validation__max_body_length=320)
        """
        nested: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                nested.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        for component, overrides in nested.items():
            if component not in ("serializer", "validation"):
                raise ConfigValidationError(
                    f"Unknown configuration component: {component}",
                    field_name=component,
                )
            top_level[component] = replace(getattr(self, component), **overrides)

        return replace(self, **top_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        def _to_plain(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {name: _to_plain(getattr(obj, name))
                        for name in obj.__dataclass_fields__}
            if isinstance(obj, (list, tuple)):
                return [_to_plain(item) for item in obj]
            if isinstance(obj, dict):
                return {key: _to_plain(value) for key, value in obj.items()}
            return obj

        return _to_plain(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TwiMLConfig":
        """Create configuration from a dictionary produced by ``to_dict``."""
        def _freeze(value: Any) -> Any:
            if isinstance(value, list):
                return tuple(_freeze(item) for item in value)
            if isinstance(value, dict):
                return {key: _freeze(item) for key, item in value.items()}
            return value

        try:
            serializer = SerializerConfig(**data.get("serializer", {}))
            validation = ValidationConfig(**{
                key: _freeze(value)
                for key, value in data.get("validation", {}).items()
            })
        except TypeError as e:
            raise ConfigValidationError(f"Unknown configuration field: {e}") from e

        return cls(
            serializer=serializer,
            validation=validation,
            correlation_id=data.get("correlation_id"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "TwiMLConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def default(cls) -> "TwiMLConfig":
        """Platform limits and the standard vocabulary."""
        return cls()

    @classmethod
    def lenient(cls) -> "TwiMLConfig":
        """Accept SIP and client identifiers as phone numbers, websocket URLs as URLs."""
        return cls(validation=ValidationConfig(
            url_prefixes=("http://", "https://", "/", "wss://"),
            phone_prefixes=("+", "client:", "sip:"),
        ))
