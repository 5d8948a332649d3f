"""Element name sanitizing for use as JSON object keys and script identifiers."""

from typing import FrozenSet

# JavaScript reserved words, including the future reserved words of
# ECMAScript 3 and the literals that cannot be used as identifiers.
RESERVED_WORDS: FrozenSet[str] = frozenset({
    "abstract", "boolean", "break", "byte", "case", "catch", "char", "class",
    "const", "continue", "debugger", "default", "delete", "do", "double",
    "else", "enum", "export", "extends", "false", "final", "finally", "float",
    "for", "function", "goto", "if", "implements", "import", "in",
    "instanceof", "int", "interface", "let", "long", "native", "new", "null",
    "package", "private", "protected", "public", "return", "short", "static",
    "super", "switch", "synchronized", "this", "throw", "throws", "transient",
    "true", "try", "typeof", "var", "void", "volatile", "while", "with",
    "yield",
})

HYPHEN_REPLACEMENT = "_"
RESERVED_PREFIX = "_"


def is_identifier_char(char: str) -> bool:
    """Characters allowed after the first one of an identifier (XID_Continue)."""
    return ("_" + char).isidentifier()


def escape_character(char: str) -> str:
    """
    Encode a disallowed character as ``_uXXXX_``.

    The code point is written in uppercase hex with at least four digits,
    so ``+`` becomes ``_u002B_``.
    """
    return f"_u{ord(char):04X}_"


def is_reserved(name: str) -> bool:
    return name in RESERVED_WORDS


def sanitize(name: str) -> str:
    """
    Map an element name to a string that is safe as a JSON key and identifier.

    Hyphens become underscores, other characters that cannot appear in an
    identifier are hex-encoded, and a result that is a reserved word gets
    an underscore prefix. Attribute names and text are never sanitized.

    Args:
        name: Raw element name

    Returns:
        Sanitized name
    """
    parts = []
    for char in name:
        if is_identifier_char(char):
            parts.append(char)
        elif char == "-":
            parts.append(HYPHEN_REPLACEMENT)
        else:
            parts.append(escape_character(char))

    sanitized = "".join(parts)
    if is_reserved(sanitized):
        sanitized = RESERVED_PREFIX + sanitized
    return sanitized
