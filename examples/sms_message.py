#!/usr/bin/env python3
"""
SMS/MMS Example for TwiML Markup.

Replies to an inbound message with text and attachments, shows how caller
supplied text is escaped, and how the media limit is reported.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from twiml_markup import MessagingResponse, TwiMLConfig


def reply_example():
    """Plain SMS reply and an MMS with a receipt image."""

    print("💬 SMS REPLY")
    print("=" * 40)

    response = MessagingResponse()
    response.message("Thanks! Your order #1042 has shipped.", to="+15551234567")

    message = response.message()
    message.body("Here is your receipt")
    message.media("https://example.com/receipts/1042.png")

    print(response)
    print(f"\n{response.validate_strict().summary()}")


def untrusted_input_example():
    """Untrusted text is escaped and cannot add elements."""

    print("\n🛡️  UNTRUSTED INPUT")
    print("=" * 40)

    response = MessagingResponse()
    response.message("<script>alert('x')</script> & </Body><Redirect>/evil</Redirect>")

    print(response)
    print(f"\n{response.validate().summary()}")


def media_limit_example():
    """Attachments above the recommended maximum produce a warning."""

    print("\n🖼️  MEDIA LIMIT")
    print("=" * 40)

    config = TwiMLConfig().override(validation__max_media_per_message=3)
    response = MessagingResponse(config)
    album = response.message("Trip photos")
    for index in range(5):
        album.media(f"https://example.com/photos/{index}.jpg")

    warnings, error = response.validate()
    print(f"Error: {error}")
    for warning in warnings:
        print(f"  - {warning}")


if __name__ == "__main__":
    reply_example()
    untrusted_input_example()
    media_limit_example()
