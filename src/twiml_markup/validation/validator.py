"""Multi-pass validation of rendered markup.

Passes run in order and the first hard error ends the call:

1. Well-formedness: lxml parses the string as a single XML document.
2. Structure: the declaration opens the document and the root tag matches
   the response kind.
3. Semantics, on every element wherever nested: URL and phone number
   prefixes, length limits on spoken text and message bodies, and a soft
   limit on media attachments per message.
4. Logic, on the top-level verb sequence only: verbs after the first
   terminal verb are unreachable.

Lenient validation returns findings from passes 3 and 4 as warnings; strict
validation escalates a non-empty warning list to an error.
"""

import time
from typing import List, Optional, Union

from lxml import etree

from twiml_markup.markup import (
    DocumentKind,
    MarkupSerializer,
    XMLDocument,
)
from twiml_markup.shared import TwiMLConfig, ValidationConfig, get_logger

from .types import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    WarningType,
)

_UTF8_BOM = b"\xef\xbb\xbf"
_DECLARATION_START = b"<?xml"

ValidationSource = Union[str, bytes, XMLDocument]


class _PassFailure(Exception):
    """Internal signal carrying the error that ends the current pass."""

    def __init__(self, error: ValidationError) -> None:
        super().__init__(str(error))
        self.error = error


def _make_parser() -> etree.XMLParser:
    # One parser per call; lxml parsers must not be shared across threads
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
        remove_comments=False,
    )


def _text_content(element: etree._Element) -> str:
    """Descendant text of ``element`` without comments or its own tail."""
    return etree.tostring(element, method="text", encoding="unicode", with_tail=False)


class TwiMLValidator:
    """Best-effort validator for voice, messaging and fax responses."""

    def __init__(
        self,
        config: Optional[TwiMLConfig] = None,
        strict: bool = False,
        kind: DocumentKind = DocumentKind.VOICE,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize validator.

        Args:
            config: Limits and vocabulary; defaults to platform limits
            strict: Escalate any warning to an error
            kind: Expected response kind when validating raw strings
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or TwiMLConfig()
        self.strict = strict
        self.kind = kind
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "validator")

    @property
    def rules(self) -> ValidationConfig:
        return self.config.validation

    def validate(self, source: ValidationSource) -> ValidationResult:
        """Validate a rendered string, UTF-8 bytes or a document.

        Documents are rendered with the configured serializer first and are
        never modified.
        """
        start_time = time.time()
        expected_root = self.kind.root_tag
        if isinstance(source, XMLDocument):
            expected_root = source.kind.root_tag
            source = MarkupSerializer(self.config.serializer, self.correlation_id).render(source)

        data = source.encode("utf-8") if isinstance(source, str) else source
        result = ValidationResult(strict=self.strict)

        try:
            root = self._check_well_formed(data)
            self._check_structure(data, root, expected_root)
            result.warnings.extend(self._check_semantics(root, result))
            result.warnings.extend(self._check_logic(root))
        except _PassFailure as failure:
            result.warnings = []
            result.error = failure.error

        if self.strict and result.error is None and result.warnings:
            result.error = ValidationError.strict_warnings(result.warnings)
            self.logger.debug(
                "Warnings escalated in strict mode",
                extra={"warning_count": len(result.warnings)},
            )

        result.processing_time_ms = (time.time() - start_time) * 1000
        self.logger.debug(
            "Validation completed",
            extra={
                "valid": result.is_valid,
                "error_kind": result.error.kind.name if result.error else None,
                "warning_count": len(result.warnings),
                "elements_validated": result.elements_validated,
                "processing_time_ms": result.processing_time_ms,
            },
        )
        return result

    def _check_well_formed(self, data: bytes) -> etree._Element:
        try:
            root = etree.fromstring(data, _make_parser())
        except (etree.XMLSyntaxError, ValueError) as e:
            raise _PassFailure(ValidationError.malformed_xml(str(e) or "Empty document")) from e
        if root is None:
            raise _PassFailure(ValidationError.malformed_xml("Document has no root element"))
        return root

    def _check_structure(self, data: bytes, root: etree._Element, expected_root: str) -> None:
        body = data[len(_UTF8_BOM):] if data.startswith(_UTF8_BOM) else data
        if not body.startswith(_DECLARATION_START):
            raise _PassFailure(ValidationError.missing_declaration())
        if root.tag != expected_root:
            raise _PassFailure(ValidationError.missing_root(expected_root, str(root.tag)))

    def _check_semantics(
        self, root: etree._Element, result: ValidationResult
    ) -> List[ValidationWarning]:
        rules = self.rules
        tree = root.getroottree()
        warnings: List[ValidationWarning] = []

        for element in root.iter(etree.Element):
            result.elements_validated += 1
            tag = element.tag
            path = tree.getpath(element)

            for name in rules.url_attributes:
                value = element.get(name)
                if value and not rules.is_url(value):
                    raise _PassFailure(ValidationError.invalid_url(name, value, path))

            for name in rules.phone_attributes_for(tag):
                value = element.get(name)
                if value and not rules.is_phone_number(value):
                    raise _PassFailure(ValidationError.invalid_phone_number(name, value, path))

            if tag in rules.url_content_tags:
                value = (element.text or "").strip()
                if value and not rules.is_url(value):
                    raise _PassFailure(ValidationError.invalid_url(tag, value, path))

            if tag in rules.phone_content_tags:
                value = (element.text or "").strip()
                if value and not rules.is_phone_number(value):
                    raise _PassFailure(ValidationError.invalid_phone_number(tag, value, path))

            if tag in rules.say_tags:
                self._check_length(element, rules.max_say_length, path)
            elif tag in rules.body_tags:
                self._check_length(element, rules.max_body_length, path)

            if tag == rules.message_tag:
                media_count = len(element.findall(rules.media_tag))
                if media_count > rules.max_media_per_message:
                    warnings.append(ValidationWarning(
                        f"Warning: {media_count} media attachment(s) exceed "
                        f"recommended maximum of {rules.max_media_per_message}",
                        WarningType.MEDIA_LIMIT_EXCEEDED,
                    ))

        return warnings

    @staticmethod
    def _check_length(element: etree._Element, limit: int, path: str) -> None:
        actual = len(_text_content(element))
        if actual > limit:
            raise _PassFailure(
                ValidationError.content_too_long(element.tag, limit, actual, path)
            )

    def _check_logic(self, root: etree._Element) -> List[ValidationWarning]:
        rules = self.rules
        verbs = [child for child in root if isinstance(child.tag, str)]
        warnings: List[ValidationWarning] = []

        for index, verb in enumerate(verbs):
            if verb.tag == rules.redirect_verb and not (verb.text or "").strip():
                warnings.append(ValidationWarning(
                    f"Warning: Redirect at index {index} has an empty URL, "
                    "which will create an infinite loop",
                    WarningType.EMPTY_REDIRECT_URL,
                    index,
                ))

            if verb.tag in rules.terminal_verbs:
                unreachable = len(verbs) - index - 1
                if unreachable > 0:
                    warnings.append(ValidationWarning(
                        f"Warning: {unreachable} verb(s) after {verb.tag} "
                        f"at index {index} will never be reached",
                        WarningType.UNREACHABLE_VERBS,
                        index,
                    ))
                break

        return warnings


def validate(
    source: ValidationSource,
    config: Optional[TwiMLConfig] = None,
    kind: DocumentKind = DocumentKind.VOICE,
) -> ValidationResult:
    """Lenient validation: logic findings are warnings."""
    return TwiMLValidator(config, strict=False, kind=kind).validate(source)


def validate_strict(
    source: ValidationSource,
    config: Optional[TwiMLConfig] = None,
    kind: DocumentKind = DocumentKind.VOICE,
) -> ValidationResult:
    """Strict validation: any warning fails the document."""
    return TwiMLValidator(config, strict=True, kind=kind).validate(source)
