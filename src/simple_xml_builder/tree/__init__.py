"""In-memory XML node tree and its string renderer.

Key Components:
    XmlNode: Element with attributes, text, children and a parent link
    header: XML declaration line
"""

from .node import XmlNode, header

__all__ = [
    "XmlNode",
    "header",
]
