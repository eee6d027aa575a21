"""Fax responses."""

from enum import Enum
from typing import Optional, Union

from twiml_markup.markup import DocumentKind
from twiml_markup.shared import InvalidParameterError

from .base import BaseResponse, TwiMLElement
from .voice import MethodLike


class FaxMediaType(Enum):
    PDF = "application/pdf"
    TIFF = "image/tiff"


class FaxPageSize(Enum):
    LETTER = "letter"
    LEGAL = "legal"
    A4 = "a4"


class Receive(TwiMLElement):
    """<Receive> verb; accepts an incoming fax."""

    TAG = "Receive"
    ENUMS = {"media_type": FaxMediaType, "page_size": FaxPageSize}

    def __init__(
        self,
        action: Optional[str] = None,
        media_type: Optional[Union[FaxMediaType, str]] = None,
        method: Optional[MethodLike] = None,
        page_size: Optional[Union[FaxPageSize, str]] = None,
        store_media: Optional[bool] = None,
    ) -> None:
        super().__init__(
            action=action,
            media_type=media_type,
            method=method,
            page_size=page_size,
            store_media=store_media,
        )


class FaxResponse(BaseResponse):
    """<Response> answering an incoming fax; holds at most one <Receive>."""

    KIND = DocumentKind.FAX

    def receive(
        self,
        action: Optional[str] = None,
        media_type: Optional[Union[FaxMediaType, str]] = None,
        method: Optional[MethodLike] = None,
        page_size: Optional[Union[FaxPageSize, str]] = None,
        store_media: Optional[bool] = None,
    ) -> Receive:
        if any(verb.tag == Receive.TAG for verb in self.verbs):
            raise InvalidParameterError(
                "receive", "A fax response can hold only one <Receive>"
            )
        return self.append(Receive(action, media_type, method, page_size, store_media))
