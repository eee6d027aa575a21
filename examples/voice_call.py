#!/usr/bin/env python3
"""
Voice Call Example for TwiML Markup.

Builds an IVR menu with SSML, a dial-out with nested nouns and a media
stream, then renders and validates each response.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from twiml_markup import TwiMLConfig, VoiceResponse
from twiml_markup.responses.voice import GatherInput, StreamTrack


def ivr_menu_example():
    """Greeting, menu and fallback with SSML emphasis."""

    print("📞 IVR MENU")
    print("=" * 40)

    response = VoiceResponse()
    response.comment_before("Main menu for inbound calls")

    say = response.say("Thanks for calling. ", voice="Polly.Joanna")
    say.emphasis("Your call matters", level="moderate")
    say.break_(time="300ms")

    gather = response.gather(
        input=[GatherInput.DTMF, GatherInput.SPEECH],
        action="/ivr/choice",
        num_digits=1,
        timeout=5,
    )
    gather.say("Press one for sales, or two for support.")

    response.comment("Reached only when no input is gathered")
    response.say("We did not receive any input. Goodbye.")
    response.hangup()

    print(response)
    print(f"\n{response.validate().summary()}")


def dial_out_example():
    """Dial a number and a client, with recording callbacks."""

    print("\n☎️  DIAL OUT")
    print("=" * 40)

    response = VoiceResponse()
    dial = response.dial(
        caller_id="+15551230000",
        timeout=20,
        record="record-from-answer",
        recording_status_callback="https://example.com/recordings",
    )
    dial.number("+15557654321", status_callback_event=["answered", "completed"])
    dial.client("support-agent").parameter("ticket", "8812")

    # Unreachable: the call ends at Hangup
    response.hangup()
    response.say("This is never spoken")

    result = response.validate()
    print(response)
    print(f"\n{result.summary()}")
    for message in result.messages:
        print(f"  - {message}")
    print(f"Strict: {response.validate_strict().summary()}")


def media_stream_example():
    """Websocket streams need the lenient preset."""

    print("\n🎧 MEDIA STREAM")
    print("=" * 40)

    response = VoiceResponse(TwiMLConfig.lenient())
    response.start().stream(
        name="live-transcript",
        url="wss://stream.example.com/audio",
        track=StreamTrack.INBOUND,
    )
    response.say("This call may be monitored.")
    response.connect(action="/after-bot").stream(url="wss://bot.example.com")

    print(response)
    print(f"\nLenient preset: {response.validate().summary()}")
    print(f"Default config: {VoiceResponse().validate().summary()}")


if __name__ == "__main__":
    ivr_menu_example()
    dial_out_example()
    media_stream_example()
