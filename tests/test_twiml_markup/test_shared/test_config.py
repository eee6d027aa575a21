"""Tests for the configuration system."""

import json

import pytest

from twiml_markup.shared.config import (
    DEFAULT_MAX_BODY_LENGTH,
    DEFAULT_MAX_MEDIA_PER_MESSAGE,
    DEFAULT_MAX_SAY_LENGTH,
    SerializerConfig,
    TwiMLConfig,
    ValidationConfig,
)
from twiml_markup.shared.exceptions import ConfigError, ConfigValidationError


class TestSerializerConfig:
    """Test suite for SerializerConfig."""

    def test_default_configuration(self) -> None:
        """Test default serializer values."""
        config = SerializerConfig()

        assert config.indent == "  "
        assert config.xml_version == "1.0"
        assert config.encoding == "UTF-8"

    def test_tab_indent_allowed(self) -> None:
        """Test that tabs are accepted as indentation."""
        assert SerializerConfig(indent="\t").indent == "\t"

    @pytest.mark.parametrize("kwargs,field_name", [
        ({"indent": "--"}, "indent"),
        ({"xml_version": ""}, "xml_version"),
        ({"encoding": ""}, "encoding"),
    ])
    def test_validation_failures(self, kwargs, field_name) -> None:
        """Test invalid serializer values are rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            SerializerConfig(**kwargs)

        assert exc_info.value.field_name == field_name


class TestValidationConfig:
    """Test suite for ValidationConfig."""

    def test_default_limits(self) -> None:
        """Test default platform limits."""
        config = ValidationConfig()

        assert config.max_say_length == DEFAULT_MAX_SAY_LENGTH == 4096
        assert config.max_body_length == DEFAULT_MAX_BODY_LENGTH == 1600
        assert config.max_media_per_message == DEFAULT_MAX_MEDIA_PER_MESSAGE == 10
        assert config.terminal_verbs == ("Hangup", "Redirect", "Reject")

    @pytest.mark.parametrize("value,expected", [
        ("http://example.com", True),
        ("https://example.com/a", True),
        ("/relative/path", True),
        ("ftp://example.com", False),
        ("example.com", False),
        ("wss://example.com", False),
    ])
    def test_is_url(self, value, expected) -> None:
        """Test URL prefix rule."""
        assert ValidationConfig().is_url(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("+15551234567", True),
        ("5551234567", False),
        ("client:alice", False),
    ])
    def test_is_phone_number(self, value, expected) -> None:
        """Test phone number prefix rule."""
        assert ValidationConfig().is_phone_number(value) is expected

    @pytest.mark.parametrize("name", [
        "max_say_length", "max_body_length", "max_media_per_message",
    ])
    def test_limits_must_be_positive(self, name) -> None:
        """Test that zero limits are rejected."""
        with pytest.raises(ConfigValidationError, match=name):
            ValidationConfig(**{name: 0})

    def test_empty_prefixes_rejected(self) -> None:
        """Test that empty prefix lists carry a suggestion."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ValidationConfig(url_prefixes=())

        assert exc_info.value.field_name == "url_prefixes"
        assert exc_info.value.suggestions

    def test_phone_attributes_lookup(self) -> None:
        """Test per-element phone attribute lookup."""
        config = ValidationConfig()

        assert config.phone_attributes_for("Dial") == ("callerId",)
        assert config.phone_attributes_for("Message") == ("to", "from")
        assert config.phone_attributes_for("Say") == ()

    def test_phone_attributes_mapping_stored_as_pairs(self) -> None:
        """Test a mapping is accepted and frozen into pairs."""
        config = ValidationConfig(phone_attributes={"Enqueue": ["callerId"]})

        assert config.phone_attributes == (("Enqueue", ("callerId",)),)
        assert config.phone_attributes_for("Enqueue") == ("callerId",)


class TestTwiMLConfig:
    """Test suite for the aggregate configuration."""

    def test_immutability(self) -> None:
        """Test that configuration cannot be mutated in place."""
        config = TwiMLConfig()

        with pytest.raises(AttributeError):
            config.correlation_id = "abc"

    def test_override_nested_field(self) -> None:
        """Test double-underscore overrides."""
        config = TwiMLConfig().override(
            validation__max_body_length=320,
            serializer__indent="    ",
            correlation_id="req-1",
        )

        assert config.validation.max_body_length == 320
        assert config.validation.max_say_length == 4096
        assert config.serializer.indent == "    "
        assert config.correlation_id == "req-1"

    def test_override_unknown_component(self) -> None:
        """Test that unknown components are rejected."""
        with pytest.raises(ConfigValidationError):
            TwiMLConfig().override(tree__depth=3)

    def test_override_revalidates(self) -> None:
        """Test that overrides run field validation."""
        with pytest.raises(ConfigValidationError):
            TwiMLConfig().override(validation__max_say_length=-1)

    def test_json_round_trip(self) -> None:
        """Test serialization to JSON and back."""
        config = TwiMLConfig.lenient().override(correlation_id="abc")

        restored = TwiMLConfig.from_json(config.to_json())

        assert restored == config
        assert json.loads(config.to_json())["validation"]["phone_prefixes"] == [
            "+", "client:", "sip:",
        ]

    def test_hashable(self) -> None:
        """Test that equal configurations hash equal."""
        restored = TwiMLConfig.from_json(TwiMLConfig().to_json())

        assert hash(TwiMLConfig()) == hash(restored)
        assert len({TwiMLConfig(), restored, TwiMLConfig.lenient()}) == 2

    def test_from_dict_unknown_field(self) -> None:
        """Test unknown keys surface as configuration errors."""
        with pytest.raises(ConfigValidationError):
            TwiMLConfig.from_dict({"validation": {"max_pages": 3}})

    def test_presets(self) -> None:
        """Test default and lenient presets."""
        assert TwiMLConfig.default() == TwiMLConfig()

        lenient = TwiMLConfig.lenient().validation
        assert lenient.is_url("wss://stream.example.com")
        assert lenient.is_phone_number("sip:alice@example.com")
        assert lenient.max_say_length == 4096


class TestConfigValidationError:
    """Test suite for configuration exceptions."""

    def test_hierarchy(self) -> None:
        """Test exception hierarchy."""
        error = ConfigValidationError("bad", field_name="indent")

        assert isinstance(error, ConfigError)
        assert str(error) == "bad"
        assert error.suggestions == []
