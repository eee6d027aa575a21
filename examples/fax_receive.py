#!/usr/bin/env python3
"""
Fax Receive Example for TwiML Markup.

Accepts an incoming fax as a PDF and prints the validated document.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from twiml_markup import FaxResponse, InvalidParameterError
from twiml_markup.responses.fax import FaxMediaType, FaxPageSize


def receive_example():
    """Receive a fax and store it as a PDF."""

    print("📠 FAX RECEIVE")
    print("=" * 40)

    response = FaxResponse()
    response.receive(
        action="/fax/received",
        media_type=FaxMediaType.PDF,
        page_size=FaxPageSize.LETTER,
        store_media=True,
    )

    print(response)
    print(f"\n{response.validate_strict().summary()}")

    try:
        response.receive()
    except InvalidParameterError as e:
        print(f"Second receive refused: {e}")


if __name__ == "__main__":
    receive_example()
