"""Core node tree implementation for XML document building.

This module implements the element node used to build a document in memory
and the recursive renderer that turns a tree into indented XML text.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from simple_xml_builder.character.escaping import escape_attribute, escape_text
from simple_xml_builder.shared.config import RenderConfig
from simple_xml_builder.shared.logging import get_logger

DEFAULT_VERSION = "1.0"
DEFAULT_ENCODING = "UTF-8"

logger = get_logger(__name__, component="xml_node")


def header(version: str = DEFAULT_VERSION, encoding: str = DEFAULT_ENCODING) -> str:
    """Build the XML declaration line, including its trailing newline."""
    return f'<?xml version="{version}" encoding="{encoding}"?>\n'


@dataclass(eq=False)
class XmlNode:
    """A single XML element in an in-memory document tree.

    Nodes are grown builder-style: ``child`` returns the new child, ``attr``
    returns the node it was called on, and ``next`` returns a new sibling, so
    whole documents can be written as one chained expression::

        XmlNode("root").attr("title", "demo").child("br").next("br")

    ``attributes`` and ``children`` stay ``None`` until the first entry is
    added. Nodes are only attached through ``child``, so every non-root node
    has exactly one parent and the tree cannot contain cycles.
    """

    name: str
    text: Optional[Any] = None
    attributes: Optional[Dict[str, Any]] = field(default=None, init=False)
    children: Optional[List["XmlNode"]] = field(default=None, init=False)
    parent: Optional["XmlNode"] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate element name."""
        if not self.name:
            raise ValueError("Element name cannot be empty")

    # Tree construction

    def child(self, name: str, text: Optional[Any] = None) -> "XmlNode":
        """Append a new child element and return it.

        Args:
            name: Element name of the child
            text: Optional text content of the child

        Returns:
            The newly created child node
        """
        if self.children is None:
            self.children = []

        node = XmlNode(name, text)
        node.parent = self
        self.children.append(node)
        return node

    def attr(self, name: str, value: Any) -> "XmlNode":
        """Set an attribute, overwriting any existing value, and return self.

        An overwritten attribute keeps its original rendering position.
        """
        if self.attributes is None:
            self.attributes = {}

        self.attributes[name] = value
        return self

    def next(self, name: str, text: Optional[Any] = None) -> "XmlNode":
        """Append a sibling element to this node's parent and return it.

        The sibling goes to the end of the parent's children, which is not
        necessarily directly after this node.

        Called on a root node this returns a new *detached* node that is not
        linked to any tree. Keep a reference to the result if it is needed,
        otherwise it is silently lost.
        """
        if self.parent is None:
            logger.debug(
                "Sibling requested on a root node, returning a detached node",
                extra={"root": self.name, "sibling": name},
            )
            return XmlNode(name, text)
        return self.parent.child(name, text)

    # Navigation

    def root(self) -> "XmlNode":
        """Walk parent links up to the root of this node's tree."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def is_root(self) -> bool:
        """Check whether this node has no parent."""
        return self.parent is None

    @property
    def is_empty(self) -> bool:
        """Check whether this node renders in self-closing form."""
        return not self.children and (self.text is None or str(self.text) == "")

    @property
    def depth(self) -> int:
        """Number of parent links between this node and its root (root = 0)."""
        count = 0
        node = self
        while node.parent is not None:
            node = node.parent
            count += 1
        return count

    def get_attribute(self, name: str, default: Optional[Any] = None) -> Optional[Any]:
        """Get attribute value with optional default."""
        if self.attributes is None:
            return default
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return self.attributes is not None and name in self.attributes

    def find_child(self, name: str) -> Optional["XmlNode"]:
        """Find first direct child with matching element name."""
        for node in self.children or []:
            if node.name == name:
                return node
        return None

    def find_children(self, name: str) -> List["XmlNode"]:
        """Find all direct children with matching element name."""
        return [node for node in self.children or [] if node.name == name]

    def iter_nodes(self) -> Iterator["XmlNode"]:
        """Yield this node and all of its descendants in document order."""
        yield self
        for node in self.children or []:
            yield from node.iter_nodes()

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {"name": self.name}

        if self.attributes is not None:
            result["attributes"] = dict(self.attributes)

        if self.text is not None:
            result["text"] = self.text

        if self.children is not None:
            result["children"] = [node.to_dict() for node in self.children]

        return result

    # Rendering

    def render(self, indent: int = 0, config: Optional[RenderConfig] = None) -> str:
        """Render this node and its descendants as XML text.

        Args:
            indent: Number of leading spaces for this node; 0 marks the
                document root, which also gets no leading newline
            config: Indentation and escaping settings, defaults if omitted

        Returns:
            XML string without a declaration
        """
        if config is None:
            config = RenderConfig()

        parts: List[str] = []
        self._render_into(parts, indent, config)
        return "".join(parts)

    def _render_into(self, parts: List[str], indent: int, config: RenderConfig) -> None:
        text = None if self.text is None else str(self.text)
        empty = not self.children and not text

        if indent != 0:
            parts.append("\n")
        parts.append(" " * indent)
        parts.append("<" + self.name)

        if self.attributes is not None:
            for name, value in self.attributes.items():
                escaped = escape_attribute(str(value), config.attribute_escapes)
                parts.append(f' {name}="{escaped}"')

        if empty:
            parts.append("/>")
            return

        parts.append(">")
        if self.children:
            for node in self.children:
                node._render_into(parts, indent + config.indent, config)
            parts.append("\n")

        # Text always follows all children rather than being interleaved.
        if text is not None:
            parts.append(escape_text(text, config.text_escapes))
        else:
            parts.append(" " * indent)
        parts.append(f"</{self.name}>")

    def with_header(
        self,
        version: str = DEFAULT_VERSION,
        encoding: str = DEFAULT_ENCODING,
        doctype: Optional[str] = None,
        config: Optional[RenderConfig] = None,
    ) -> str:
        """Render the whole document, from its root, with an XML declaration.

        Args:
            version: XML version for the declaration
            encoding: Encoding name for the declaration
            doctype: Text placed after the root name in ``<!DOCTYPE ...>``;
                no DOCTYPE line is written when omitted
            config: Indentation and escaping settings, defaults if omitted

        Returns:
            Complete XML document string
        """
        root = self.root()
        result = header(version, encoding)
        if doctype is not None:
            result += f"<!DOCTYPE {root.name} {doctype}>\n"
        return result + root.render(0, config)

    def __str__(self) -> str:
        return self.render(0)
