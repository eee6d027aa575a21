"""Document model and rendering for markup responses.

Key Components:
    XMLDocument: Root container owning the response element and outer comments
    XMLElement: Element with ordered attributes and ordered children
    XMLText / XMLComment: Leaf nodes
    MarkupSerializer: Deterministic, escaping XML renderer
    escape_text / escape_attr: Injection-safe escaping
"""

from .escape import escape_attr, escape_text
from .nodes import (
    RESPONSE_TAG,
    CommentPosition,
    DocumentKind,
    MarkupNode,
    XMLComment,
    XMLDocument,
    XMLElement,
    XMLText,
    append_child,
    append_comment,
    append_verb,
    new_document,
    new_element,
    set_attribute,
)
from .serializer import MarkupSerializer, render

__all__ = [
    "escape_attr",
    "escape_text",
    "RESPONSE_TAG",
    "CommentPosition",
    "DocumentKind",
    "MarkupNode",
    "XMLComment",
    "XMLDocument",
    "XMLElement",
    "XMLText",
    "append_child",
    "append_comment",
    "append_verb",
    "new_document",
    "new_element",
    "set_attribute",
    "MarkupSerializer",
    "render",
]
