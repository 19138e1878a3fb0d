"""Character-level escaping for XML output.

Key Components:
    escape_text: Escape element content (``&``, ``<``, ``>``)
    escape_attribute: Escape double-quoted attribute values (``&``, ``"``)
    TEXT_ESCAPES / ATTRIBUTE_ESCAPES: Default substitution tables
"""

from .escaping import (
    AMPERSAND_ESCAPE,
    ATTRIBUTE_ESCAPES,
    TEXT_ESCAPES,
    escape,
    escape_attribute,
    escape_text,
)

__all__ = [
    "AMPERSAND_ESCAPE",
    "ATTRIBUTE_ESCAPES",
    "TEXT_ESCAPES",
    "escape",
    "escape_attribute",
    "escape_text",
]
