"""Tests for voice call responses."""

from lxml import etree

import pytest

from twiml_markup.responses import HttpMethod, attribute_name, format_value
from twiml_markup.responses.voice import (
    GatherInput,
    RejectReason,
    Say,
    StreamTrack,
    Trim,
    VoiceResponse,
)
from twiml_markup.shared import InvalidParameterError, TwiMLConfig
from twiml_markup.validation import ValidationErrorType

DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class TestAttributeFormatting:
    """Keyword names and values map onto attributes."""

    @pytest.mark.parametrize("name,expected", [
        ("voice", "voice"),
        ("caller_id", "callerId"),
        ("recording_status_callback_method", "recordingStatusCallbackMethod"),
        ("interpret_as", "interpret-as"),
        ("xml_lang", "xml:lang"),
        ("from_", "from"),
        ("for_", "for"),
    ])
    def test_attribute_name(self, name, expected) -> None:
        """Test snake_case to attribute name mapping."""
        assert attribute_name(name) == expected

    @pytest.mark.parametrize("value,expected", [
        (True, "true"),
        (False, "false"),
        (10, "10"),
        (["initiated", "answered"], "initiated answered"),
        (HttpMethod.GET, "GET"),
        ("plain", "plain"),
    ])
    def test_format_value(self, value, expected) -> None:
        """Test value formatting rules."""
        assert format_value(value) == expected


class TestVoiceResponse:
    """Test suite for VoiceResponse."""

    def test_say_and_hangup(self) -> None:
        """Test the simplest call flow."""
        response = VoiceResponse()
        response.say("Hello", voice="alice", language="en-US")
        response.hangup()

        assert str(response) == "\n".join([
            DECLARATION,
            "<Response>",
            '  <Say voice="alice" language="en-US">Hello</Say>',
            "  <Hangup/>",
            "</Response>",
        ])
        assert response.validate().is_valid

    def test_factory_returns_handle(self) -> None:
        """Test nested nouns are built on the returned verb."""
        response = VoiceResponse()
        dial = response.dial(caller_id="+15551230000", timeout=20, record="record-from-answer")
        dial.number("+15557654321", send_digits="wwww1234")
        dial.client("alice").parameter("ticket", "42")

        assert response.to_xml() == "\n".join([
            DECLARATION,
            "<Response>",
            '  <Dial timeout="20" callerId="+15551230000" record="record-from-answer">',
            '    <Number sendDigits="wwww1234">+15557654321</Number>',
            '    <Client>alice<Parameter name="ticket" value="42"/></Client>',
            "  </Dial>",
            "</Response>",
        ])
        assert [verb.tag for verb in response.verbs] == ["Dial"]
        assert [child.tag for child in dial.element_children] == ["Number", "Client"]

    def test_gather_with_prompts(self) -> None:
        """Test gather nests prompts and joins list inputs."""
        response = VoiceResponse()
        gather = response.gather(
            input=[GatherInput.SPEECH, "dtmf"],
            action="/handle-input",
            method="POST",
            num_digits=1,
            barge_in=True,
        )
        gather.say("Press one for sales")
        gather.pause(length=2)

        root = etree.fromstring(response.to_xml().encode("utf-8"))
        element = root.find("Gather")
        assert element.get("input") == "speech dtmf"
        assert element.get("numDigits") == "1"
        assert element.get("bargeIn") == "true"
        assert [child.tag for child in element] == ["Say", "Pause"]
        assert response.validate().is_valid

    def test_ssml_mixed_content(self) -> None:
        """Test SSML children render inline with surrounding text."""
        say = Say("Hello ", voice="Polly.Joanna")
        say.emphasis("world", level="strong")
        say.break_(time="500ms")
        say.say_as("12345", interpret_as="digits")
        say.append_text(" done")
        response = VoiceResponse()
        response.append(say)

        assert response.to_xml().splitlines()[2] == (
            '  <Say voice="Polly.Joanna">Hello <emphasis level="strong">world</emphasis>'
            '<break time="500ms"/><say-as interpret-as="digits">12345</say-as> done</Say>'
        )

    def test_ssml_lang_attribute(self) -> None:
        """Test the xml:lang attribute parses in the XML namespace."""
        response = VoiceResponse()
        response.say().lang("Bonjour", xml_lang="fr-FR")

        root = etree.fromstring(response.to_xml().encode("utf-8"))
        lang = root.find("Say/lang")
        assert lang.get("{http://www.w3.org/XML/1998/namespace}lang") == "fr-FR"

    @pytest.mark.parametrize("factory,kwargs", [
        ("reject", {"reason": "declined"}),
        ("record", {"trim": "trim-all"}),
        ("gather", {"input": "keypad"}),
        ("redirect", {"url": "/next", "method": "PUT"}),
    ])
    def test_enumerated_attributes_rejected(self, factory, kwargs) -> None:
        """Test values outside closed vocabularies raise at construction."""
        response = VoiceResponse()

        with pytest.raises(InvalidParameterError):
            getattr(response, factory)(**kwargs)

        assert response.verbs == []

    def test_enumerated_attributes_accepted(self) -> None:
        """Test enum members and their values are both accepted."""
        response = VoiceResponse()
        response.record(trim=Trim.DO_NOT_TRIM, method="GET", play_beep=False)
        response.reject(reason=RejectReason.BUSY)

        record, reject = response.verbs
        assert record.attributes == {
            "method": "GET", "playBeep": "false", "trim": "do-not-trim",
        }
        assert reject.get_attribute("reason") == "busy"

    def test_unknown_keyword_rejected(self) -> None:
        """Test attributes outside the verb's vocabulary are refused."""
        with pytest.raises(TypeError):
            VoiceResponse().say("Hi", colour="blue")

    def test_start_and_connect_streams(self) -> None:
        """Test media streams validate with the lenient preset."""
        response = VoiceResponse(TwiMLConfig.lenient())
        start = response.start()
        start.stream(name="monitor", url="wss://media.example.com", track=StreamTrack.BOTH)
        start.recording(channels="dual", recording_status_callback="/recordings")
        stream = response.connect(action="/after").stream(url="wss://bot.example.com")
        stream.parameter("caller", "+15551234567")

        xml = response.to_xml()
        assert 'track="both_tracks"' in xml
        assert 'channels="dual"' in xml
        assert response.validate_strict().is_valid

    def test_default_config_rejects_websocket_urls(self) -> None:
        """Test wss:// URLs fail with the default configuration."""
        response = VoiceResponse()
        response.connect().stream(url="wss://bot.example.com")

        _, error = response.validate()

        assert error.kind is ValidationErrorType.INVALID_URL

    def test_enqueue_with_task(self) -> None:
        """Test task JSON is escaped as text."""
        response = VoiceResponse()
        response.enqueue(workflow_sid="WW123").task('{"language": "fr"}', priority=5)

        assert '<Task priority="5">{"language": "fr"}</Task>' in response.to_xml()

    def test_pay_with_prompt(self) -> None:
        """Test pay nests prompts that nest say."""
        response = VoiceResponse()
        pay = response.pay(charge_amount="10.00", payment_method="credit-card")
        pay.prompt(for_="payment-card-number", attempt=[1, 2]).say("Enter your card")

        xml = response.to_xml()
        assert 'paymentMethod="credit-card"' in xml
        assert '<Prompt for="payment-card-number" attempt="1 2">' in xml
        assert response.validate().is_valid

    def test_refer_sip(self) -> None:
        """Test refer nests a SIP target."""
        response = VoiceResponse()
        response.refer(action="/refer-done").sip("sip:alice@example.com")

        assert "<Sip>sip:alice@example.com</Sip>" in response.to_xml()

    def test_unreachable_verbs(self) -> None:
        """Test verbs after hangup are reported."""
        response = VoiceResponse()
        response.hangup()
        response.say("never")
        response.leave()

        warnings, error = response.validate()

        assert error is None
        assert [w.message for w in warnings] == [
            "Warning: 2 verb(s) after Hangup at index 0 will never be reached"
        ]
        assert response.validate_strict().error.kind is (
            ValidationErrorType.STRICT_WARNINGS
        )

    def test_comments(self) -> None:
        """Test comment placement around and between verbs."""
        response = VoiceResponse()
        response.comment_before("generated")
        response.say("Hi")
        response.comment("then hang up")
        response.hangup()
        response.comment_after("end")

        assert response.to_xml() == "\n".join([
            DECLARATION,
            "<!-- generated -->",
            "<Response>",
            "  <Say>Hi</Say>",
            "  <!-- then hang up -->",
            "  <Hangup/>",
            "</Response>",
            "<!-- end -->",
        ])
        assert response.validate().is_valid

    def test_injection_through_builder(self) -> None:
        """Test caller input cannot add elements."""
        response = VoiceResponse()
        response.say("</Say><Hangup/><Say>", voice='x" loop="99')

        root = etree.fromstring(response.to_xml().encode("utf-8"))
        assert [child.tag for child in root] == ["Say"]
        assert root[0].get("voice") == 'x" loop="99'
        assert root[0].get("loop") is None

    def test_correlation_id_flows_to_logs(self, caplog) -> None:
        """Test builder logging carries the configured correlation ID."""
        response = VoiceResponse(TwiMLConfig(correlation_id="call-7"))

        with caplog.at_level("DEBUG", logger="twiml_markup"):
            response.hangup()
            response.validate()

        assert caplog.records
        assert {record.correlation_id for record in caplog.records} == {"call-7"}
