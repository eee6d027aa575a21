"""XML escaping for text content and attribute values.

Both functions are total: any string, including empty, non-ASCII or control
characters, maps to a string at least as long. Escaping happens exactly once,
at render time; callers store raw values in the tree.

Only the characters in the tables below are replaced, so a parser can read
back something other than the raw value. XML end-of-line handling turns
``\\r`` and ``\\r\\n`` into ``\\n``, and in attribute values tab and newline
are further normalised to spaces. Control characters other than tab, newline
and carriage return are not allowed in XML 1.0, and a document carrying them
is rejected as malformed.
"""

_TEXT_TABLE = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
})

_ATTR_TABLE = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_text(text: str) -> str:
    """Escape text content placed between tags.

    >>> escape_text("Hello <script>alert('xss')</script>")
    "Hello &lt;script&gt;alert('xss')&lt;/script&gt;"
    """
    return text.translate(_TEXT_TABLE)


def escape_attr(value: str) -> str:
    """Escape a value for a single- or double-quoted attribute.

    >>> escape_attr('value with "quotes" and <tags>')
    'value with &quot;quotes&quot; and &lt;tags&gt;'
    """
    return value.translate(_ATTR_TABLE)
