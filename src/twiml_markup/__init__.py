"""TwiML Markup.

Builds, renders and validates the XML documents that drive voice calls,
messaging replies and fax reception. Rendering is deterministic and every
attribute value and text node is escaped, so no caller input can alter the
document structure.

Progressive API Disclosure:
- Level 1: Response builders - VoiceResponse, MessagingResponse, FaxResponse
- Level 2: Validation - validate(), validate_strict(), TwiMLValidator
- Level 3: Core tree - new_document(), new_element(), append_child(), render()
"""

__version__ = "0.1.0"
__author__ = "TwiML Markup Team"

# Progressive API disclosure - Level 1: Response builders
from .responses import FaxResponse, MessagingResponse, VoiceResponse

# Progressive API disclosure - Level 2: Validation
from .validation import (
    TwiMLValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    ValidationWarning,
    validate,
    validate_strict,
)

# Progressive API disclosure - Level 3: Core tree and rendering
from .markup import (
    CommentPosition,
    DocumentKind,
    MarkupSerializer,
    XMLComment,
    XMLDocument,
    XMLElement,
    XMLText,
    append_child,
    append_comment,
    append_verb,
    escape_attr,
    escape_text,
    new_document,
    new_element,
    render,
    set_attribute,
)

# Configuration and errors
from .shared import (
    DocumentValidationError,
    InvalidParameterError,
    TwiMLConfig,
    TwiMLError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Response builders
    "VoiceResponse",
    "MessagingResponse",
    "FaxResponse",

    # Level 2: Validation
    "validate",
    "validate_strict",
    "TwiMLValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "ValidationWarning",

    # Level 3: Core tree and rendering
    "new_document",
    "new_element",
    "set_attribute",
    "append_child",
    "append_comment",
    "append_verb",
    "render",
    "escape_text",
    "escape_attr",
    "CommentPosition",
    "DocumentKind",
    "MarkupSerializer",
    "XMLComment",
    "XMLDocument",
    "XMLElement",
    "XMLText",

    # Configuration and errors
    "TwiMLConfig",
    "TwiMLError",
    "InvalidParameterError",
    "DocumentValidationError",
]
