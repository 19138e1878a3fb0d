"""Escaping policy for element text and attribute values.

``&`` is always replaced first and exactly once; each context then applies
its own table of literal-to-replacement substitutions on top of that.
"""

from typing import Dict, Mapping, Optional

AMPERSAND = "&"
AMPERSAND_ESCAPE = "&amp;"

# Default tables, excluding "&" which is handled unconditionally.
TEXT_ESCAPES: Dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
}
ATTRIBUTE_ESCAPES: Dict[str, str] = {
    '"': "&quot;",
}


def escape(value: str, table: Mapping[str, str]) -> str:
    """Replace ``&`` and then every literal in ``table`` within ``value``.

    Args:
        value: Raw string to escape
        table: Literal-to-replacement substitutions applied after ``&``;
            an ``&`` entry is ignored so ``&`` is never escaped twice

    Returns:
        Escaped string
    """
    value = value.replace(AMPERSAND, AMPERSAND_ESCAPE)
    for literal, replacement in table.items():
        if literal == AMPERSAND:
            continue
        value = value.replace(literal, replacement)
    return value


def escape_text(value: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Escape a string for use as element content."""
    return escape(value, TEXT_ESCAPES if table is None else table)


def escape_attribute(value: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Escape a string for use inside a double-quoted attribute value."""
    return escape(value, ATTRIBUTE_ESCAPES if table is None else table)
