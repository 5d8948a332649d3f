"""JSON string escaping."""

import json

# json.dumps leaves the solidus alone, it is escaped here so the output can
# be embedded in markup and script blocks.
_SOLIDUS = "/"
_ESCAPED_SOLIDUS = "\\/"


def escape(text: str) -> str:
    """
    Escape text as the body of a JSON string literal, without the quotes.

    Backslash, double quote and solidus are backslash-escaped and control
    characters use the standard JSON escapes. Non-ASCII characters are
    written unescaped.
    """
    return json.dumps(text, ensure_ascii=False)[1:-1].replace(_SOLIDUS, _ESCAPED_SOLIDUS)


def quote(text: str) -> str:
    """Escape text and wrap it in double quotes."""
    return f'"{escape(text)}"'
