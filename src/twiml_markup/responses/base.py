"""Shared building blocks for response documents.

Verb and noun classes are ``XMLElement`` subclasses with a fixed tag. Their
keyword parameters are snake_case and become camelCase attributes; values are
formatted once at construction:

    bool   -> "true" / "false"
    list   -> space-separated values
    Enum   -> member value
    other  -> str(value)

Parameters left as ``None`` produce no attribute.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from twiml_markup.markup import (
    CommentPosition,
    DocumentKind,
    MarkupNode,
    MarkupSerializer,
    XMLComment,
    XMLDocument,
    XMLElement,
    append_child,
    append_comment,
    new_document,
)
from twiml_markup.shared import InvalidParameterError, TwiMLConfig, get_logger
from twiml_markup.validation import TwiMLValidator, ValidationResult

N = TypeVar("N", bound=MarkupNode)
E = TypeVar("E", bound=Enum)

# Attribute names that do not follow the camelCase rule
_SPECIAL_ATTRIBUTE_NAMES = {
    "interpret_as": "interpret-as",
    "xml_lang": "xml:lang",
    "from_": "from",
    "for_": "for",
}


class HttpMethod(Enum):
    """HTTP methods accepted by callback attributes."""

    GET = "GET"
    POST = "POST"


def attribute_name(name: str) -> str:
    """Map a snake_case keyword to its attribute name."""
    if name in _SPECIAL_ATTRIBUTE_NAMES:
        return _SPECIAL_ATTRIBUTE_NAMES[name]
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def format_value(value: Any) -> str:
    """Format a keyword value as attribute text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return " ".join(format_value(item) for item in value)
    return str(value)


def coerce_enum(
    enum_cls: Type[E], value: Union[E, str, None], param: str
) -> Optional[E]:
    """Resolve ``value`` to a member of ``enum_cls``.

    Raises:
        InvalidParameterError: If the value is outside the vocabulary
    """
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise InvalidParameterError(
            param, f"{value!r} is not one of: {allowed}"
        ) from None


def _enum_for(name: str, enums: Dict[str, Type[Enum]]) -> Optional[Type[Enum]]:
    if name in enums:
        return enums[name]
    if name == "method" or name.endswith("_method"):
        return HttpMethod
    return None


class TwiMLElement(XMLElement):
    """Element whose tag is fixed by its class.

    ``ENUMS`` maps keyword names to their closed vocabularies. Keywords named
    ``method`` or ending in ``_method`` are HTTP methods unless listed there.
    """

    TAG = ""
    ENUMS: Dict[str, Type[Enum]] = {}

    def __init__(self, text: Optional[str] = None, **attributes: Any) -> None:
        super().__init__(self.TAG)
        for name, value in attributes.items():
            if value is None:
                continue
            enum_cls = _enum_for(name, self.ENUMS)
            if enum_cls is not None:
                if isinstance(value, (list, tuple)):
                    value = [coerce_enum(enum_cls, item, name) for item in value]
                else:
                    value = coerce_enum(enum_cls, value, name)
            self.set_attribute(attribute_name(name), format_value(value))
        if text is not None:
            self.append_text(text)

    def nest(self, node: N) -> N:
        """Append a nested noun or verb and return it."""
        append_child(self, node)
        return node


class BaseResponse:
    """Owns one document and appends verbs to its root in execution order."""

    KIND = DocumentKind.VOICE

    def __init__(self, config: Optional[TwiMLConfig] = None) -> None:
        self.config = config or TwiMLConfig()
        self.document: XMLDocument = new_document(self.KIND)
        self.logger = get_logger(
            __name__, self.config.correlation_id, self.KIND.value
        )

    def __str__(self) -> str:
        return self.to_xml()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(verbs={[v.tag for v in self.verbs]!r})"

    @property
    def verbs(self) -> List[XMLElement]:
        return self.document.verbs

    def append(self, node: N) -> N:
        """Append a verb (or any node) to the response and return it."""
        self.document.append_verb(node)
        self.logger.debug(
            "Node appended",
            extra={"node": getattr(node, "tag", type(node).__name__)},
        )
        return node

    def comment(self, text: str) -> XMLComment:
        """Add an inline comment between verbs."""
        return append_comment(self.document, text, CommentPosition.INLINE)

    def comment_before(self, text: str) -> XMLComment:
        """Add a comment ahead of the root element."""
        return append_comment(self.document, text, CommentPosition.BEFORE)

    def comment_after(self, text: str) -> XMLComment:
        """Add a comment after the closing root tag."""
        return append_comment(self.document, text, CommentPosition.AFTER)

    def to_xml(self) -> str:
        """Render the response with the configured serializer."""
        serializer = MarkupSerializer(
            self.config.serializer, self.config.correlation_id
        )
        return serializer.render(self.document)

    def to_dict(self) -> Dict[str, Any]:
        return self.document.to_dict()

    def validate(self) -> ValidationResult:
        """Lenient validation of the rendered response."""
        return TwiMLValidator(self.config, strict=False).validate(self.document)

    def validate_strict(self) -> ValidationResult:
        """Strict validation: any warning fails the response."""
        return TwiMLValidator(self.config, strict=True).validate(self.document)
