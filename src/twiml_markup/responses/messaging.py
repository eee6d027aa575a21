"""Messaging (SMS/MMS) responses."""

from typing import Any, Optional

from twiml_markup.markup import DocumentKind

from .base import BaseResponse, TwiMLElement
from .voice import MethodLike, Redirect


class Body(TwiMLElement):
    """<Body> noun; the message text."""

    TAG = "Body"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class Media(TwiMLElement):
    """<Media> noun; the content is the URL of one attachment."""

    TAG = "Media"

    def __init__(self, url: str) -> None:
        super().__init__(url)


class Message(TwiMLElement):
    """<Message> verb holding a body and any number of media attachments."""

    TAG = "Message"

    def __init__(
        self,
        body: Optional[str] = None,
        to: Optional[str] = None,
        from_: Optional[str] = None,
        action: Optional[str] = None,
        method: Optional[MethodLike] = None,
        status_callback: Optional[str] = None,
    ) -> None:
        super().__init__(
            to=to,
            from_=from_,
            action=action,
            method=method,
            status_callback=status_callback,
        )
        if body is not None:
            self.body(body)

    def body(self, message: str) -> Body:
        return self.nest(Body(message))

    def media(self, url: str) -> Media:
        return self.nest(Media(url))


class MessagingResponse(BaseResponse):
    """<Response> answering an inbound message."""

    KIND = DocumentKind.MESSAGING

    def message(self, body: Optional[str] = None, **kwargs: Any) -> Message:
        return self.append(Message(body, **kwargs))

    def redirect(self, url: str, method: Optional[MethodLike] = None) -> Redirect:
        return self.append(Redirect(url, method))
