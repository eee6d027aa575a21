"""Voice call responses.

Factory methods append a new verb or noun and return it, so nested nouns are
built on the returned handle::

    response = VoiceResponse()
    dial = response.dial(caller_id="+15551230000")
    dial.number("+15557654321")
    response.hangup()

Plain text between SSML elements is added with ``append_text``.
"""

from enum import Enum
from typing import Any, List, Optional, Sequence, Union

from .base import BaseResponse, HttpMethod, TwiMLElement

MethodLike = Union[HttpMethod, str]


class RejectReason(Enum):
    REJECTED = "rejected"
    BUSY = "busy"


class GatherInput(Enum):
    DTMF = "dtmf"
    SPEECH = "speech"


class StreamTrack(Enum):
    INBOUND = "inbound_track"
    OUTBOUND = "outbound_track"
    BOTH = "both_tracks"


class RecordingChannels(Enum):
    MONO = "mono"
    DUAL = "dual"


class Trim(Enum):
    TRIM_SILENCE = "trim-silence"
    DO_NOT_TRIM = "do-not-trim"


class PaymentMethod(Enum):
    ACH_DEBIT = "ach-debit"
    CREDIT_CARD = "credit-card"


# ---------------------------------------------------------------------------
# SSML
# ---------------------------------------------------------------------------


class SsmlContainer(TwiMLElement):
    """Element that accepts SSML children mixed with plain text."""

    def break_(self, strength: Optional[str] = None, time: Optional[str] = None) -> "SsmlBreak":
        return self.nest(SsmlBreak(strength=strength, time=time))

    def emphasis(self, words: str, level: Optional[str] = None) -> "SsmlEmphasis":
        return self.nest(SsmlEmphasis(words, level=level))

    def lang(self, words: str, xml_lang: str) -> "SsmlLang":
        return self.nest(SsmlLang(words, xml_lang=xml_lang))

    def p(self, words: str) -> "SsmlP":
        return self.nest(SsmlP(words))

    def phoneme(self, words: str, ph: str, alphabet: Optional[str] = None) -> "SsmlPhoneme":
        return self.nest(SsmlPhoneme(words, alphabet=alphabet, ph=ph))

    def prosody(
        self,
        words: str,
        pitch: Optional[str] = None,
        rate: Optional[str] = None,
        volume: Optional[str] = None,
    ) -> "SsmlProsody":
        return self.nest(SsmlProsody(words, pitch=pitch, rate=rate, volume=volume))

    def s(self, words: str) -> "SsmlS":
        return self.nest(SsmlS(words))

    def say_as(self, words: str, interpret_as: str, format: Optional[str] = None) -> "SsmlSayAs":
        return self.nest(SsmlSayAs(words, interpret_as=interpret_as, format=format))

    def sub(self, words: str, alias: str) -> "SsmlSub":
        return self.nest(SsmlSub(words, alias=alias))

    def w(self, words: str, role: Optional[str] = None) -> "SsmlW":
        return self.nest(SsmlW(words, role=role))


class SsmlBreak(TwiMLElement):
    TAG = "break"


class SsmlEmphasis(SsmlContainer):
    TAG = "emphasis"


class SsmlLang(SsmlContainer):
    TAG = "lang"


class SsmlP(SsmlContainer):
    TAG = "p"


class SsmlPhoneme(TwiMLElement):
    TAG = "phoneme"


class SsmlProsody(SsmlContainer):
    TAG = "prosody"


class SsmlS(SsmlContainer):
    TAG = "s"


class SsmlSayAs(TwiMLElement):
    TAG = "say-as"


class SsmlSub(TwiMLElement):
    TAG = "sub"


class SsmlW(TwiMLElement):
    TAG = "w"


# ---------------------------------------------------------------------------
# Verbs that speak or play
# ---------------------------------------------------------------------------


class Say(SsmlContainer):
    """<Say> verb; text and SSML children are spoken in order."""

    TAG = "Say"

    def __init__(
        self,
        message: Optional[str] = None,
        voice: Optional[str] = None,
        language: Optional[str] = None,
        loop: Optional[int] = None,
    ) -> None:
        super().__init__(message, voice=voice, language=language, loop=loop)


class Play(TwiMLElement):
    """<Play> verb; the content is the audio URL."""

    TAG = "Play"

    def __init__(
        self,
        url: Optional[str] = None,
        loop: Optional[int] = None,
        digits: Optional[str] = None,
    ) -> None:
        super().__init__(url, loop=loop, digits=digits)


class Pause(TwiMLElement):
    TAG = "Pause"

    def __init__(self, length: Optional[int] = None) -> None:
        super().__init__(length=length)


class _Prompting(TwiMLElement):
    """Element that nests Say, Play and Pause."""

    def say(self, message: Optional[str] = None, **kwargs: Any) -> Say:
        return self.nest(Say(message, **kwargs))

    def play(self, url: Optional[str] = None, **kwargs: Any) -> Play:
        return self.nest(Play(url, **kwargs))

    def pause(self, length: Optional[int] = None) -> Pause:
        return self.nest(Pause(length))


class _Parameterized(TwiMLElement):
    """Element that nests <Parameter> name/value pairs."""

    def parameter(self, name: str, value: str) -> "Parameter":
        return self.nest(Parameter(name, value))


class Parameter(TwiMLElement):
    TAG = "Parameter"

    def __init__(self, name: str, value: str) -> None:
        super().__init__(name=name, value=value)


# ---------------------------------------------------------------------------
# Dial and its nouns
# ---------------------------------------------------------------------------


class Number(TwiMLElement):
    """<Number> noun; the content is the E.164 number dialed."""

    TAG = "Number"

    def __init__(
        self,
        phone_number: str,
        send_digits: Optional[str] = None,
        url: Optional[str] = None,
        method: Optional[MethodLike] = None,
        status_callback: Optional[str] = None,
        status_callback_event: Optional[Sequence[str]] = None,
        status_callback_method: Optional[MethodLike] = None,
        byoc: Optional[str] = None,
        machine_detection: Optional[str] = None,
        machine_detection_timeout: Optional[int] = None,
        amd_status_callback: Optional[str] = None,
        amd_status_callback_method: Optional[MethodLike] = None,
    ) -> None:
        super().__init__(
            phone_number,
            send_digits=send_digits,
            url=url,
            method=method,
            status_callback=status_callback,
            status_callback_event=status_callback_event,
            status_callback_method=status_callback_method,
            byoc=byoc,
            machine_detection=machine_detection,
            machine_detection_timeout=machine_detection_timeout,
            amd_status_callback=amd_status_callback,
            amd_status_callback_method=amd_status_callback_method,
        )


class Identity(TwiMLElement):
    TAG = "Identity"

    def __init__(self, client_identity: str) -> None:
        super().__init__(client_identity)


class Client(_Parameterized):
    """<Client> noun; either direct text or an <Identity> child names the client."""

    TAG = "Client"

    def __init__(
        self,
        identity: Optional[str] = None,
        url: Optional[str] = None,
        method: Optional[MethodLike] = None,
        status_callback_event: Optional[Sequence[str]] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
    ) -> None:
        super().__init__(
            identity,
            url=url,
            method=method,
            status_callback_event=status_callback_event,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
        )

    def identity(self, client_identity: str) -> Identity:
        return self.nest(Identity(client_identity))


class Sip(TwiMLElement):
    TAG = "Sip"

    def __init__(
        self,
        sip_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        url: Optional[str] = None,
        method: Optional[MethodLike] = None,
        status_callback_event: Optional[Sequence[str]] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
    ) -> None:
        super().__init__(
            sip_url,
            username=username,
            password=password,
            url=url,
            method=method,
            status_callback_event=status_callback_event,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
        )


class Conference(TwiMLElement):
    TAG = "Conference"
    ENUMS = {"trim": Trim}

    def __init__(
        self,
        name: str,
        muted: Optional[bool] = None,
        beep: Optional[Union[bool, str]] = None,
        start_conference_on_enter: Optional[bool] = None,
        end_conference_on_exit: Optional[bool] = None,
        wait_url: Optional[str] = None,
        wait_method: Optional[MethodLike] = None,
        max_participants: Optional[int] = None,
        record: Optional[str] = None,
        region: Optional[str] = None,
        coach: Optional[str] = None,
        trim: Optional[Union[Trim, str]] = None,
        status_callback_event: Optional[Sequence[str]] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
        recording_status_callback: Optional[str] = None,
        recording_status_callback_method: Optional[MethodLike] = None,
        recording_status_callback_event: Optional[Sequence[str]] = None,
        event_callback_url: Optional[str] = None,
        jitter_buffer_size: Optional[str] = None,
        participant_label: Optional[str] = None,
    ) -> None:
        super().__init__(
            name,
            muted=muted,
            beep=beep,
            start_conference_on_enter=start_conference_on_enter,
            end_conference_on_exit=end_conference_on_exit,
            wait_url=wait_url,
            wait_method=wait_method,
            max_participants=max_participants,
            record=record,
            region=region,
            coach=coach,
            trim=trim,
            status_callback_event=status_callback_event,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
            recording_status_callback=recording_status_callback,
            recording_status_callback_method=recording_status_callback_method,
            recording_status_callback_event=recording_status_callback_event,
            event_callback_url=event_callback_url,
            jitter_buffer_size=jitter_buffer_size,
            participant_label=participant_label,
        )


class Queue(TwiMLElement):
    TAG = "Queue"

    def __init__(
        self,
        name: str,
        url: Optional[str] = None,
        method: Optional[MethodLike] = None,
        reservation_sid: Optional[str] = None,
        post_work_activity_sid: Optional[str] = None,
    ) -> None:
        super().__init__(
            name,
            url=url,
            method=method,
            reservation_sid=reservation_sid,
            post_work_activity_sid=post_work_activity_sid,
        )


class Sim(TwiMLElement):
    TAG = "Sim"

    def __init__(self, sim_sid: str) -> None:
        super().__init__(sim_sid)


class Dial(TwiMLElement):
    """<Dial> verb; direct text is a phone number, or nest nouns instead."""

    TAG = "Dial"
    ENUMS = {"trim": Trim}

    def __init__(
        self,
        number: Optional[str] = None,
        action: Optional[str] = None,
        method: Optional[MethodLike] = None,
        timeout: Optional[int] = None,
        hangup_on_star: Optional[bool] = None,
        time_limit: Optional[int] = None,
        caller_id: Optional[str] = None,
        record: Optional[str] = None,
        trim: Optional[Union[Trim, str]] = None,
        recording_status_callback: Optional[str] = None,
        recording_status_callback_method: Optional[MethodLike] = None,
        recording_status_callback_event: Optional[Sequence[str]] = None,
        answer_on_bridge: Optional[bool] = None,
        ring_tone: Optional[str] = None,
        recording_track: Optional[str] = None,
        sequential: Optional[bool] = None,
        refer_url: Optional[str] = None,
        refer_method: Optional[MethodLike] = None,
    ) -> None:
        super().__init__(
            number,
            action=action,
            method=method,
            timeout=timeout,
            hangup_on_star=hangup_on_star,
            time_limit=time_limit,
            caller_id=caller_id,
            record=record,
            trim=trim,
            recording_status_callback=recording_status_callback,
            recording_status_callback_method=recording_status_callback_method,
            recording_status_callback_event=recording_status_callback_event,
            answer_on_bridge=answer_on_bridge,
            ring_tone=ring_tone,
            recording_track=recording_track,
            sequential=sequential,
            refer_url=refer_url,
            refer_method=refer_method,
        )

    def number(self, phone_number: str, **kwargs: Any) -> Number:
        return self.nest(Number(phone_number, **kwargs))

    def client(self, identity: Optional[str] = None, **kwargs: Any) -> Client:
        return self.nest(Client(identity, **kwargs))

    def sip(self, sip_url: str, **kwargs: Any) -> Sip:
        return self.nest(Sip(sip_url, **kwargs))

    def conference(self, name: str, **kwargs: Any) -> Conference:
        return self.nest(Conference(name, **kwargs))

    def queue(self, name: str, **kwargs: Any) -> Queue:
        return self.nest(Queue(name, **kwargs))

    def sim(self, sim_sid: str) -> Sim:
        return self.nest(Sim(sim_sid))


# ---------------------------------------------------------------------------
# Input collection and call control
# ---------------------------------------------------------------------------


class Gather(_Prompting):
    """<Gather> verb; nested prompts play while input is collected."""

    TAG = "Gather"
    ENUMS = {"input": GatherInput}

    def __init__(
        self,
        input: Optional[Union[GatherInput, str, List[Union[GatherInput, str]]]] = None,
        action: Optional[str] = None,
        method: Optional[MethodLike] = None,
        timeout: Optional[int] = None,
        finish_on_key: Optional[str] = None,
        num_digits: Optional[int] = None,
        partial_result_callback: Optional[str] = None,
        partial_result_callback_method: Optional[MethodLike] = None,
        language: Optional[str] = None,
        hints: Optional[str] = None,
        barge_in: Optional[bool] = None,
        speech_timeout: Optional[str] = None,
        speech_model: Optional[str] = None,
        profanity_filter: Optional[bool] = None,
        action_on_empty_result: Optional[bool] = None,
        enhanced: Optional[bool] = None,
    ) -> None:
        super().__init__(
            input=input,
            action=action,
            method=method,
            timeout=timeout,
            finish_on_key=finish_on_key,
            num_digits=num_digits,
            partial_result_callback=partial_result_callback,
            partial_result_callback_method=partial_result_callback_method,
            language=language,
            hints=hints,
            barge_in=barge_in,
            speech_timeout=speech_timeout,
            speech_model=speech_model,
            profanity_filter=profanity_filter,
            action_on_empty_result=action_on_empty_result,
            enhanced=enhanced,
        )


class Hangup(TwiMLElement):
    TAG = "Hangup"

    def __init__(self) -> None:
        super().__init__()


class Redirect(TwiMLElement):
    """<Redirect> verb; the content is the URL of the next document."""

    TAG = "Redirect"

    def __init__(self, url: str, method: Optional[MethodLike] = None) -> None:
        super().__init__(url, method=method)


class Reject(TwiMLElement):
    TAG = "Reject"
    ENUMS = {"reason": RejectReason}

    def __init__(self, reason: Optional[Union[RejectReason, str]] = None) -> None:
        super().__init__(reason=reason)


class Record(TwiMLElement):
    TAG = "Record"
    ENUMS = {"trim": Trim}

    def __init__(
        self,
        action: Optional[str] = None,
        method: Optional[MethodLike] = None,
        timeout: Optional[int] = None,
        finish_on_key: Optional[str] = None,
        max_length: Optional[int] = None,
        play_beep: Optional[bool] = None,
        trim: Optional[Union[Trim, str]] = None,
        recording_status_callback: Optional[str] = None,
        recording_status_callback_method: Optional[MethodLike] = None,
        recording_status_callback_event: Optional[Sequence[str]] = None,
        transcribe: Optional[bool] = None,
        transcribe_callback: Optional[str] = None,
    ) -> None:
        super().__init__(
            action=action,
            method=method,
            timeout=timeout,
            finish_on_key=finish_on_key,
            max_length=max_length,
            play_beep=play_beep,
            trim=trim,
            recording_status_callback=recording_status_callback,
            recording_status_callback_method=recording_status_callback_method,
            recording_status_callback_event=recording_status_callback_event,
            transcribe=transcribe,
            transcribe_callback=transcribe_callback,
        )


class Task(TwiMLElement):
    """<Task> noun; the content is the task attributes as JSON."""

    TAG = "Task"

    def __init__(
        self,
        body: str,
        priority: Optional[int] = None,
        timeout: Optional[int] = None,
    ) -> None:
        super().__init__(body, priority=priority, timeout=timeout)


class Enqueue(TwiMLElement):
    TAG = "Enqueue"

    def __init__(
        self,
        name: Optional[str] = None,
        action: Optional[str] = None,
        method: Optional[MethodLike] = None,
        wait_url: Optional[str] = None,
        wait_url_method: Optional[MethodLike] = None,
        workflow_sid: Optional[str] = None,
    ) -> None:
        super().__init__(
            name,
            action=action,
            method=method,
            wait_url=wait_url,
            wait_url_method=wait_url_method,
            workflow_sid=workflow_sid,
        )

    def task(self, body: str, **kwargs: Any) -> Task:
        return self.nest(Task(body, **kwargs))


class Leave(TwiMLElement):
    TAG = "Leave"

    def __init__(self) -> None:
        super().__init__()


class Echo(TwiMLElement):
    TAG = "Echo"

    def __init__(self) -> None:
        super().__init__()


class Sms(TwiMLElement):
    """<Sms> verb; the content is the message body."""

    TAG = "Sms"

    def __init__(
        self,
        message: str,
        to: Optional[str] = None,
        from_: Optional[str] = None,
        action: Optional[str] = None,
        method: Optional[MethodLike] = None,
        status_callback: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            to=to,
            from_=from_,
            action=action,
            method=method,
            status_callback=status_callback,
        )


# ---------------------------------------------------------------------------
# Media streams, recordings and transcriptions
# ---------------------------------------------------------------------------


class Stream(_Parameterized):
    TAG = "Stream"
    ENUMS = {"track": StreamTrack}

    def __init__(
        self,
        name: Optional[str] = None,
        url: Optional[str] = None,
        track: Optional[Union[StreamTrack, str]] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
    ) -> None:
        super().__init__(
            name=name,
            url=url,
            track=track,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
        )


class Siprec(_Parameterized):
    TAG = "Siprec"
    ENUMS = {"track": StreamTrack}

    def __init__(
        self,
        name: Optional[str] = None,
        connector_name: Optional[str] = None,
        track: Optional[Union[StreamTrack, str]] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
    ) -> None:
        super().__init__(
            name=name,
            connector_name=connector_name,
            track=track,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
        )


class Transcription(_Parameterized):
    TAG = "Transcription"
    ENUMS = {"track": StreamTrack}

    def __init__(
        self,
        name: Optional[str] = None,
        track: Optional[Union[StreamTrack, str]] = None,
        status_callback_url: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
        language_code: Optional[str] = None,
        transcription_engine: Optional[str] = None,
        speech_model: Optional[str] = None,
        partial_results: Optional[bool] = None,
        profanity_filter: Optional[bool] = None,
        hints: Optional[str] = None,
        enable_automatic_punctuation: Optional[bool] = None,
    ) -> None:
        super().__init__(
            name=name,
            track=track,
            status_callback_url=status_callback_url,
            status_callback_method=status_callback_method,
            language_code=language_code,
            transcription_engine=transcription_engine,
            speech_model=speech_model,
            partial_results=partial_results,
            profanity_filter=profanity_filter,
            hints=hints,
            enable_automatic_punctuation=enable_automatic_punctuation,
        )


class Recording(TwiMLElement):
    TAG = "Recording"
    ENUMS = {"trim": Trim, "channels": RecordingChannels}

    def __init__(
        self,
        recording_status_callback: Optional[str] = None,
        recording_status_callback_method: Optional[MethodLike] = None,
        recording_status_callback_event: Optional[Sequence[str]] = None,
        trim: Optional[Union[Trim, str]] = None,
        track: Optional[str] = None,
        channels: Optional[Union[RecordingChannels, str]] = None,
    ) -> None:
        super().__init__(
            recording_status_callback=recording_status_callback,
            recording_status_callback_method=recording_status_callback_method,
            recording_status_callback_event=recording_status_callback_event,
            trim=trim,
            track=track,
            channels=channels,
        )


class Start(TwiMLElement):
    """<Start> verb; nested nouns run asynchronously alongside the call."""

    TAG = "Start"

    def __init__(
        self, action: Optional[str] = None, method: Optional[MethodLike] = None
    ) -> None:
        super().__init__(action=action, method=method)

    def stream(self, name: Optional[str] = None, **kwargs: Any) -> Stream:
        return self.nest(Stream(name, **kwargs))

    def siprec(self, name: Optional[str] = None, **kwargs: Any) -> Siprec:
        return self.nest(Siprec(name, **kwargs))

    def transcription(self, name: Optional[str] = None, **kwargs: Any) -> Transcription:
        return self.nest(Transcription(name, **kwargs))

    def recording(self, **kwargs: Any) -> Recording:
        return self.nest(Recording(**kwargs))


class Stop(TwiMLElement):
    """<Stop> verb; nested nouns name what to stop."""

    TAG = "Stop"

    def __init__(self) -> None:
        super().__init__()

    def stream(self, name: Optional[str] = None, **kwargs: Any) -> Stream:
        return self.nest(Stream(name, **kwargs))

    def siprec(self, name: Optional[str] = None, **kwargs: Any) -> Siprec:
        return self.nest(Siprec(name, **kwargs))

    def transcription(self, name: Optional[str] = None, **kwargs: Any) -> Transcription:
        return self.nest(Transcription(name, **kwargs))


# ---------------------------------------------------------------------------
# Connect and its nouns
# ---------------------------------------------------------------------------


class Room(TwiMLElement):
    TAG = "Room"

    def __init__(self, name: str, participant_identity: Optional[str] = None) -> None:
        super().__init__(name, participant_identity=participant_identity)


class Conversation(TwiMLElement):
    TAG = "Conversation"
    ENUMS = {"trim": Trim}

    def __init__(
        self,
        service_instance_sid: Optional[str] = None,
        inbound_autocreation: Optional[bool] = None,
        routing_assigned_timeout: Optional[int] = None,
        inbound_timeout: Optional[int] = None,
        url: Optional[str] = None,
        method: Optional[MethodLike] = None,
        record: Optional[str] = None,
        trim: Optional[Union[Trim, str]] = None,
        recording_status_callback: Optional[str] = None,
        recording_status_callback_method: Optional[MethodLike] = None,
        recording_status_callback_event: Optional[Sequence[str]] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
        status_callback_event: Optional[Sequence[str]] = None,
    ) -> None:
        super().__init__(
            service_instance_sid=service_instance_sid,
            inbound_autocreation=inbound_autocreation,
            routing_assigned_timeout=routing_assigned_timeout,
            inbound_timeout=inbound_timeout,
            url=url,
            method=method,
            record=record,
            trim=trim,
            recording_status_callback=recording_status_callback,
            recording_status_callback_method=recording_status_callback_method,
            recording_status_callback_event=recording_status_callback_event,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
            status_callback_event=status_callback_event,
        )


class VirtualAgent(_Parameterized):
    TAG = "VirtualAgent"

    def __init__(
        self,
        connector_name: Optional[str] = None,
        language: Optional[str] = None,
        sentiment_analysis: Optional[bool] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
    ) -> None:
        super().__init__(
            connector_name=connector_name,
            language=language,
            sentiment_analysis=sentiment_analysis,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
        )


class ConversationRelay(_Parameterized):
    TAG = "ConversationRelay"

    def __init__(
        self,
        url: str,
        language: Optional[str] = None,
        tts_language: Optional[str] = None,
        transcription_language: Optional[str] = None,
        tts_provider: Optional[str] = None,
        voice: Optional[str] = None,
        transcription_provider: Optional[str] = None,
        speech_model: Optional[str] = None,
        profanity_filter: Optional[bool] = None,
        dtmf_detection: Optional[bool] = None,
        welcome_greeting: Optional[str] = None,
        partial_prompts: Optional[bool] = None,
        welcome_greeting_interruptible: Optional[str] = None,
        interruptible: Optional[str] = None,
        hints: Optional[str] = None,
        debug: Optional[str] = None,
    ) -> None:
        super().__init__(
            url=url,
            language=language,
            tts_language=tts_language,
            transcription_language=transcription_language,
            tts_provider=tts_provider,
            voice=voice,
            transcription_provider=transcription_provider,
            speech_model=speech_model,
            profanity_filter=profanity_filter,
            dtmf_detection=dtmf_detection,
            welcome_greeting=welcome_greeting,
            partial_prompts=partial_prompts,
            welcome_greeting_interruptible=welcome_greeting_interruptible,
            interruptible=interruptible,
            hints=hints,
            debug=debug,
        )


class Connect(TwiMLElement):
    TAG = "Connect"

    def __init__(
        self, action: Optional[str] = None, method: Optional[MethodLike] = None
    ) -> None:
        super().__init__(action=action, method=method)

    def stream(self, name: Optional[str] = None, **kwargs: Any) -> Stream:
        return self.nest(Stream(name, **kwargs))

    def room(self, name: str, **kwargs: Any) -> Room:
        return self.nest(Room(name, **kwargs))

    def conversation(self, **kwargs: Any) -> Conversation:
        return self.nest(Conversation(**kwargs))

    def virtual_agent(self, **kwargs: Any) -> VirtualAgent:
        return self.nest(VirtualAgent(**kwargs))

    def conversation_relay(self, url: str, **kwargs: Any) -> ConversationRelay:
        return self.nest(ConversationRelay(url, **kwargs))


# ---------------------------------------------------------------------------
# Transfer and payments
# ---------------------------------------------------------------------------


class ReferSip(TwiMLElement):
    TAG = "Sip"

    def __init__(self, sip_url: str) -> None:
        super().__init__(sip_url)


class Refer(TwiMLElement):
    TAG = "Refer"

    def __init__(
        self, action: Optional[str] = None, method: Optional[MethodLike] = None
    ) -> None:
        super().__init__(action=action, method=method)

    def sip(self, sip_url: str) -> ReferSip:
        return self.nest(ReferSip(sip_url))


class Prompt(_Prompting):
    """<Prompt> noun; customizes what <Pay> says for one step."""

    TAG = "Prompt"

    def __init__(
        self,
        for_: Optional[str] = None,
        error_type: Optional[Sequence[str]] = None,
        card_type: Optional[Sequence[str]] = None,
        attempt: Optional[Sequence[int]] = None,
        require_matching_inputs: Optional[bool] = None,
    ) -> None:
        super().__init__(
            for_=for_,
            error_type=error_type,
            card_type=card_type,
            attempt=attempt,
            require_matching_inputs=require_matching_inputs,
        )


class Pay(_Parameterized):
    TAG = "Pay"
    ENUMS = {"payment_method": PaymentMethod}

    def __init__(
        self,
        input: Optional[str] = None,
        action: Optional[str] = None,
        status_callback: Optional[str] = None,
        status_callback_method: Optional[MethodLike] = None,
        timeout: Optional[int] = None,
        max_attempts: Optional[int] = None,
        security_code: Optional[bool] = None,
        postal_code: Optional[Union[bool, str]] = None,
        min_postal_code_length: Optional[int] = None,
        payment_connector: Optional[str] = None,
        payment_method: Optional[Union[PaymentMethod, str]] = None,
        token_type: Optional[str] = None,
        charge_amount: Optional[str] = None,
        currency: Optional[str] = None,
        description: Optional[str] = None,
        valid_card_types: Optional[Sequence[str]] = None,
        language: Optional[str] = None,
    ) -> None:
        super().__init__(
            input=input,
            action=action,
            status_callback=status_callback,
            status_callback_method=status_callback_method,
            timeout=timeout,
            max_attempts=max_attempts,
            security_code=security_code,
            postal_code=postal_code,
            min_postal_code_length=min_postal_code_length,
            payment_connector=payment_connector,
            payment_method=payment_method,
            token_type=token_type,
            charge_amount=charge_amount,
            currency=currency,
            description=description,
            valid_card_types=valid_card_types,
            language=language,
        )

    def prompt(self, **kwargs: Any) -> Prompt:
        return self.nest(Prompt(**kwargs))


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class VoiceResponse(BaseResponse):
    """<Response> for a voice call; verbs execute top to bottom."""

    def say(self, message: Optional[str] = None, **kwargs: Any) -> Say:
        return self.append(Say(message, **kwargs))

    def play(self, url: Optional[str] = None, **kwargs: Any) -> Play:
        return self.append(Play(url, **kwargs))

    def pause(self, length: Optional[int] = None) -> Pause:
        return self.append(Pause(length))

    def dial(self, number: Optional[str] = None, **kwargs: Any) -> Dial:
        return self.append(Dial(number, **kwargs))

    def gather(self, **kwargs: Any) -> Gather:
        return self.append(Gather(**kwargs))

    def hangup(self) -> Hangup:
        return self.append(Hangup())

    def redirect(self, url: str, method: Optional[MethodLike] = None) -> Redirect:
        return self.append(Redirect(url, method))

    def reject(self, reason: Optional[Union[RejectReason, str]] = None) -> Reject:
        return self.append(Reject(reason))

    def record(self, **kwargs: Any) -> Record:
        return self.append(Record(**kwargs))

    def enqueue(self, name: Optional[str] = None, **kwargs: Any) -> Enqueue:
        return self.append(Enqueue(name, **kwargs))

    def leave(self) -> Leave:
        return self.append(Leave())

    def echo(self) -> Echo:
        return self.append(Echo())

    def sms(self, message: str, **kwargs: Any) -> Sms:
        return self.append(Sms(message, **kwargs))

    def start(self, **kwargs: Any) -> Start:
        return self.append(Start(**kwargs))

    def stop(self) -> Stop:
        return self.append(Stop())

    def connect(self, **kwargs: Any) -> Connect:
        return self.append(Connect(**kwargs))

    def refer(self, **kwargs: Any) -> Refer:
        return self.append(Refer(**kwargs))

    def pay(self, **kwargs: Any) -> Pay:
        return self.append(Pay(**kwargs))

    def queue(self, name: str, **kwargs: Any) -> Queue:
        return self.append(Queue(name, **kwargs))
