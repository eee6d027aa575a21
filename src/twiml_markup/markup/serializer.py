"""Canonical XML rendering for markup documents.

Output layout:

    <?xml version="1.0" encoding="UTF-8"?>
    <!-- comments attached before the root -->
    <Response>
      <Say voice="alice">Hello</Say>
      <Hangup/>
    </Response>
    <!-- comments attached after the root -->

Element-only content is indented one child per line. Any element holding
non-empty text (a single text child or mixed content such as SSML) is written
on one line with nothing inserted between its children, so text survives a
parse unchanged. Rendering is deterministic and never mutates the document.
"""

from typing import List, Optional, Tuple, Union

from twiml_markup.shared import SerializerConfig, get_logger

from .escape import escape_attr, escape_text
from .nodes import MarkupNode, XMLComment, XMLDocument, XMLElement, XMLText


class MarkupSerializer:
    """Renders documents and elements to XML strings."""

    def __init__(
        self,
        config: Optional[SerializerConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize serializer.

        Args:
            config: Indentation, version and encoding settings
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or SerializerConfig()
        self.logger = get_logger(__name__, correlation_id, "serializer")

    @property
    def declaration(self) -> str:
        """XML declaration line."""
        return (
            f'<?xml version="{self.config.xml_version}" '
            f'encoding="{self.config.encoding}"?>'
        )

    def render(self, document: XMLDocument) -> str:
        """Render a complete document, declaration first."""
        lines: List[str] = [self.declaration]
        lines.extend(self._format_comment(c) for c in document.comments_before)
        lines.append(self.render_element(document.root))
        lines.extend(self._format_comment(c) for c in document.comments_after)

        output = "\n".join(lines)
        self.logger.debug(
            "Document rendered",
            extra={
                "kind": document.kind.value,
                "verb_count": len(document.verbs),
                "output_size": len(output),
            },
        )
        return output

    def render_element(self, element: XMLElement, level: int = 0) -> str:
        """Render one element subtree at the given nesting depth."""
        lines: List[str] = []
        # (node, level, closing): closing entries emit the end tag of a block
        stack: List[Tuple[MarkupNode, int, bool]] = [(element, level, False)]
        while stack:
            node, depth, closing = stack.pop()
            indent = self.config.indent * depth
            if closing:
                lines.append(f"{indent}</{node.tag}>")
                continue

            if isinstance(node, XMLElement):
                children = self._content_children(node)
                if children and not any(isinstance(c, XMLText) for c in children):
                    lines.append(f"{indent}<{self._format_open_tag(node)}>")
                    stack.append((node, depth, True))
                    stack.extend((child, depth + 1, False) for child in reversed(children))
                    continue

            lines.append(f"{indent}{self._render_inline(node)}")
        return "\n".join(lines)

    def _render_inline(self, node: MarkupNode) -> str:
        parts: List[str] = []
        # Plain strings on the stack are pending end tags
        stack: List[Union[MarkupNode, str]] = [node]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, XMLText):
                parts.append(escape_text(item.content))
            elif isinstance(item, XMLComment):
                parts.append(self._format_comment(item))
            else:
                opening = self._format_open_tag(item)
                children = self._content_children(item)
                if not children:
                    parts.append(f"<{opening}/>")
                    continue
                parts.append(f"<{opening}>")
                stack.append(f"</{item.tag}>")
                stack.extend(reversed(children))
        return "".join(parts)

    @staticmethod
    def _content_children(element: XMLElement) -> List[MarkupNode]:
        # Empty text carries no content and must not defeat self-closing
        return [
            child for child in element.children
            if not (isinstance(child, XMLText) and not child.content)
        ]

    @staticmethod
    def _format_open_tag(element: XMLElement) -> str:
        parts = [element.tag]
        parts.extend(
            f'{key}="{escape_attr(value)}"' for key, value in element.attributes.items()
        )
        return " ".join(parts)

    @staticmethod
    def _format_comment(comment: XMLComment) -> str:
        return f"<!-- {comment.content} -->"


def render(document: XMLDocument, config: Optional[SerializerConfig] = None) -> str:
    """Render ``document`` to its canonical XML string."""
    return MarkupSerializer(config).render(document)
