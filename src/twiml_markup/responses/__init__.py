"""Document builders for voice, messaging and fax responses.

Key Components:
    VoiceResponse: Call control verbs (Say, Dial, Gather, ...)
    MessagingResponse: SMS/MMS replies (Message, Redirect)
    FaxResponse: Fax reception (Receive)
"""

from .base import BaseResponse, HttpMethod, TwiMLElement, attribute_name, format_value
from .fax import FaxMediaType, FaxPageSize, FaxResponse, Receive
from .messaging import Body, Media, Message, MessagingResponse
from .voice import (
    Client,
    Conference,
    Connect,
    Dial,
    Gather,
    GatherInput,
    Number,
    Pay,
    RecordingChannels,
    Redirect,
    RejectReason,
    Say,
    Start,
    Stop,
    StreamTrack,
    Trim,
    VoiceResponse,
)

__all__ = [
    "BaseResponse",
    "HttpMethod",
    "TwiMLElement",
    "attribute_name",
    "format_value",
    "FaxMediaType",
    "FaxPageSize",
    "FaxResponse",
    "Receive",
    "Body",
    "Media",
    "Message",
    "MessagingResponse",
    "Client",
    "Conference",
    "Connect",
    "Dial",
    "Gather",
    "GatherInput",
    "Number",
    "Pay",
    "RecordingChannels",
    "Redirect",
    "RejectReason",
    "Say",
    "Start",
    "Stop",
    "StreamTrack",
    "Trim",
    "VoiceResponse",
]
