"""Ordered, append-only markup tree.

A document owns exactly one root element. Elements own their children;
nodes carry no parent pointer, only an ``attached`` flag, so a node can never
be placed under two parents and the tree stays acyclic. Child order is
execution order for verbs and is preserved by every operation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

from twiml_markup.shared import InvalidParameterError

RESPONSE_TAG = "Response"


class DocumentKind(Enum):
    """Response kinds; each fixes the document's root tag."""

    VOICE = "voice"
    MESSAGING = "messaging"
    FAX = "fax"

    @property
    def root_tag(self) -> str:
        """Root element tag for this kind of response."""
        return RESPONSE_TAG


class CommentPosition(Enum):
    """Where a comment is rendered relative to the document."""

    BEFORE = "before"   # after the declaration, ahead of the root element
    AFTER = "after"     # after the closing root tag
    INLINE = "inline"   # an ordinary child, in sequence order


@dataclass(eq=False)
class XMLText:
    """Raw text content, escaped once at render time."""

    content: str
    attached: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError("Text content must be a string")


@dataclass(eq=False)
class XMLComment:
    """Developer comment rendered verbatim inside ``<!-- -->``.

    The content must not contain ``--``; that is the caller's responsibility.
    """

    content: str
    attached: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError("Comment content must be a string")


@dataclass(eq=False)
class XMLElement:
    """Element with ordered attributes and ordered children."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["MarkupNode"] = field(default_factory=list, repr=False)
    attached: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate tag and attributes and take ownership of initial children."""
        if not self.tag:
            raise InvalidParameterError("tag", "Element tag cannot be empty")

        initial_attributes = self.attributes
        self.attributes = {}
        for key, value in initial_attributes.items():
            self.set_attribute(key, value)

        initial_children = self.children
        self.children = []
        for child in initial_children:
            self.append_child(child)

    def set_attribute(self, key: str, value: str) -> None:
        """Set attribute value; an existing key keeps its position."""
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("Attribute name and value must be strings")
        if not key:
            raise InvalidParameterError("key", "Attribute name cannot be empty")
        self.attributes[key] = value

    def get_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        """Check if element has specific attribute."""
        return key in self.attributes

    def append_child(self, node: "MarkupNode") -> "MarkupNode":
        """Append ``node`` as the last child and return it as a handle."""
        if not isinstance(node, (XMLElement, XMLText, XMLComment)):
            raise TypeError("Child must be an XMLElement, XMLText or XMLComment")
        if node.attached:
            raise InvalidParameterError(
                "node", "Node is already attached to a parent"
            )
        if isinstance(node, XMLElement) and node.contains(self):
            raise InvalidParameterError(
                "node", "Appending an element beneath itself would create a cycle"
            )

        node.attached = True
        self.children.append(node)
        return node

    def append_text(self, content: str) -> XMLText:
        """Append a text child."""
        text = XMLText(content)
        self.append_child(text)
        return text

    def append_comment(self, content: str) -> XMLComment:
        """Append an inline comment child."""
        comment = XMLComment(content)
        self.append_child(comment)
        return comment

    def contains(self, node: "MarkupNode") -> bool:
        """Check whether ``node`` is this element or one of its descendants."""
        for element in self.iter_elements():
            if element is node or any(child is node for child in element.children):
                return True
        return False

    @property
    def element_children(self) -> List["XMLElement"]:
        """Direct element children, skipping text and comments."""
        return [child for child in self.children if isinstance(child, XMLElement)]

    @property
    def text(self) -> str:
        """Concatenated content of the direct text children."""
        return "".join(
            child.content for child in self.children if isinstance(child, XMLText)
        )

    def itertext(self) -> Iterator[str]:
        """Yield all descendant text in document order."""
        stack: List["MarkupNode"] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if isinstance(node, XMLText):
                yield node.content
            elif isinstance(node, XMLElement):
                stack.extend(reversed(node.children))

    def iter_elements(self) -> Iterator["XMLElement"]:
        """Yield this element and all descendant elements in document order."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.element_children))

    def find(self, tag: str) -> Optional["XMLElement"]:
        """Find first descendant element with matching tag name."""
        return next(
            (elem for elem in self.iter_elements() if elem is not self and elem.tag == tag),
            None,
        )

    def find_all(self, tag: str) -> List["XMLElement"]:
        """Find all descendant elements with matching tag name."""
        return [
            elem for elem in self.iter_elements() if elem is not self and elem.tag == tag
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result = _element_header(self)
        pending = [(self, result)]
        while pending:
            element, target = pending.pop()
            if not element.children:
                continue
            target["children"] = []
            for child in element.children:
                if isinstance(child, XMLElement):
                    entry = _element_header(child)
                    pending.append((child, entry))
                elif isinstance(child, XMLText):
                    entry = {"text": child.content}
                else:
                    entry = {"comment": child.content}
                target["children"].append(entry)
        return result


MarkupNode = Union[XMLElement, XMLText, XMLComment]


def _element_header(element: XMLElement) -> Dict[str, Any]:
    header: Dict[str, Any] = {"tag": element.tag}
    if element.attributes:
        header["attributes"] = dict(element.attributes)
    return header


class XMLDocument:
    """Root container: one root element plus comments around it.

    Built by a single owner; once handed to the serializer or validator it is
    only read.
    """

    def __init__(self, kind: DocumentKind = DocumentKind.VOICE) -> None:
        if not isinstance(kind, DocumentKind):
            raise InvalidParameterError("kind", f"Unknown document kind: {kind!r}")
        self.kind = kind
        self.root = XMLElement(kind.root_tag)
        self.root.attached = True
        self.comments_before: List[XMLComment] = []
        self.comments_after: List[XMLComment] = []

    def __repr__(self) -> str:
        return (
            f"XMLDocument(kind={self.kind.value!r}, "
            f"verbs={[verb.tag for verb in self.verbs]!r})"
        )

    def append_verb(self, node: MarkupNode) -> MarkupNode:
        """Append a top-level node to the root element."""
        return self.root.append_child(node)

    def append_comment(
        self,
        content: str,
        position: CommentPosition = CommentPosition.INLINE,
    ) -> XMLComment:
        """Attach a comment before, after, or inside the root element."""
        if position is CommentPosition.INLINE:
            return self.root.append_comment(content)

        comment = XMLComment(content)
        comment.attached = True
        if position is CommentPosition.BEFORE:
            self.comments_before.append(comment)
        elif position is CommentPosition.AFTER:
            self.comments_after.append(comment)
        else:
            raise InvalidParameterError("position", f"Unknown position: {position!r}")
        return comment

    @property
    def verbs(self) -> List[XMLElement]:
        """Top-level verb elements in execution order."""
        return self.root.element_children

    def iter_elements(self) -> Iterator[XMLElement]:
        """Iterate over all elements in document order."""
        return self.root.iter_elements()

    def find_all(self, tag: str) -> List[XMLElement]:
        """Find all elements with matching tag name, root included."""
        return [elem for elem in self.iter_elements() if elem.tag == tag]

    def to_dict(self) -> Dict[str, Any]:
        """Convert document to dictionary representation."""
        result: Dict[str, Any] = {"kind": self.kind.value, "root": self.root.to_dict()}
        if self.comments_before:
            result["comments_before"] = [c.content for c in self.comments_before]
        if self.comments_after:
            result["comments_after"] = [c.content for c in self.comments_after]
        return result


def new_document(kind: DocumentKind = DocumentKind.VOICE) -> XMLDocument:
    """Create an empty document whose root tag is fixed by ``kind``."""
    return XMLDocument(kind)


def new_element(tag: str) -> XMLElement:
    """Create a detached element."""
    return XMLElement(tag)


def set_attribute(element: XMLElement, key: str, value: str) -> None:
    """Set ``key`` on ``element``; the raw value is escaped at render time."""
    element.set_attribute(key, value)


def append_child(parent: XMLElement, node: MarkupNode) -> MarkupNode:
    """Append ``node`` to ``parent`` and return it."""
    return parent.append_child(node)


def append_verb(document: XMLDocument, node: MarkupNode) -> MarkupNode:
    """Append ``node`` as the last top-level verb of ``document``."""
    return document.append_verb(node)


def append_comment(
    target: Union[XMLDocument, XMLElement],
    content: str,
    position: CommentPosition = CommentPosition.INLINE,
) -> XMLComment:
    """Attach a comment to a document or, inline only, to an element."""
    if isinstance(target, XMLDocument):
        return target.append_comment(content, position)
    if position is not CommentPosition.INLINE:
        raise InvalidParameterError(
            "position", "Only documents accept comments before or after the root"
        )
    return target.append_comment(content)
