"""Simple XML Builder.

A minimal in-memory document tree for constructing XML text: build a tree of
named nodes with attributes, text and children, then render it with
configurable indentation and escaping, an XML declaration and an optional
DOCTYPE.

Progressive API Disclosure:
- Level 1: Node tree - XmlNode(...).child(...).attr(...).next(...)
- Level 2: Configured rendering - RenderConfig
- Level 3: Object conversion - object_to_xml(), convert_object()
"""

__version__ = "0.1.0"
__author__ = "Simple XML Builder Team"

# Progressive API disclosure - Level 1: Node tree
from .tree import XmlNode, header

# Progressive API disclosure - Level 2: Configured rendering
from .shared.config import RenderConfig

# Progressive API disclosure - Level 3: Object conversion
from .api import convert_object, object_to_xml, object_to_xml_with_header

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Node tree
    "XmlNode",
    "header",

    # Level 2: Configured rendering
    "RenderConfig",

    # Level 3: Object conversion
    "convert_object",
    "object_to_xml",
    "object_to_xml_with_header",
]
