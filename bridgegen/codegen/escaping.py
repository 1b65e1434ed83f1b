"""
Text escaping for string literals in generated modules.

All emitted docstrings and string constants are wrapped in triple double
quotes. Backslashes and double quotes are neutralised, newlines and tabs
are left as-is, and every other control character (``\\r`` included, which
the tokenizer would fold into ``\\n``) or lone surrogate is written as an
escape sequence.
"""

import re
from typing import Any, Optional

NO_DOCUMENTATION = "No documentation"
NO_MODULE_DOCUMENTATION = "No documentation provided"

_NAMED_ESCAPES = {"\r": "\\r"}

_UNSAFE_CHARS = re.compile("[\x00-\x08\x0b-\x1f\x7f\ud800-\udfff]")


def _escape_char(match) -> str:
    char = match.group(0)
    if char in _NAMED_ESCAPES:
        return _NAMED_ESCAPES[char]
    code = ord(char)
    if code > 0xFF:
        return f"\\u{code:04x}"
    return f"\\x{code:02x}"


def escape_quotes(text: Any) -> str:
    """
    Escape ``text`` for embedding in a double-quoted literal.

    Args:
        text: Value to escape; non-strings are converted with ``str``

    Returns:
        Escaped text, or an empty string when ``text`` is None
    """
    if text is None:
        return ""
    escaped = str(text).replace("\\", "\\\\").replace('"', '\\"')
    return _UNSAFE_CHARS.sub(_escape_char, escaped)


def escape_doc(doc: Optional[str], placeholder: str = NO_DOCUMENTATION) -> str:
    """Escape a docstring, substituting ``placeholder`` when it is missing."""
    return escape_quotes(placeholder if doc is None else doc)
