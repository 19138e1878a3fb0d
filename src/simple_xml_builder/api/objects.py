"""Convert arbitrary objects into flat XML documents.

A type controls its own XML form by defining ``__xml_fields__``, which
returns ``(name, value)`` pairs in the order they should be written::

    class Point:
        def __init__(self, x, y):
            self.x, self.y = x, y

        def __xml_fields__(self):
            return [("x", self.x), ("y", self.y)]

Other objects fall back to their dataclass fields, or to their public
instance attributes followed by any ``__slots__`` entries.
"""

import dataclasses
from typing import Any, Callable, Iterator, List, Optional, Tuple

from simple_xml_builder.shared.config import RenderConfig
from simple_xml_builder.shared.logging import get_logger
from simple_xml_builder.shared.result import ConversionResult, DiagnosticSeverity
from simple_xml_builder.tree.node import (
    DEFAULT_ENCODING,
    DEFAULT_VERSION,
    XmlNode,
    header,
)

COMPONENT = "object_converter"

FieldReader = Tuple[str, Callable[[], Any]]


def _slot_names(cls: type) -> List[str]:
    names: List[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in names:
                names.append(slot)
    return names


def _field_readers(obj: Any) -> Iterator[FieldReader]:
    """Yield lazy readers so a failing field can be skipped on its own."""
    hook = getattr(type(obj), "__xml_fields__", None)
    if hook is not None:
        for name, value in hook(obj):
            yield name, (lambda value=value: value)
        return

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        names = [item.name for item in dataclasses.fields(obj)]
    else:
        names = list(getattr(obj, "__dict__", {}))
        for slot in _slot_names(type(obj)):
            if slot not in names and slot not in ("__dict__", "__weakref__"):
                names.append(slot)

    for name in names:
        if name.startswith("_"):
            continue
        yield name, (lambda name=name: getattr(obj, name))


def iter_object_fields(obj: Any) -> Iterator[Tuple[str, Any]]:
    """Yield ``(name, value)`` pairs for the fields that will be converted.

    Unlike ``convert_object`` this does not tolerate failures: an error
    raised while reading a field propagates to the caller.
    """
    for name, read in _field_readers(obj):
        yield name, read()


def convert_object(obj: Any, correlation_id: Optional[str] = None) -> ConversionResult:
    """Build a node tree from an object's fields.

    The root element is named after the object's type and gets one child per
    field, with the field value as text. A field whose value cannot be read
    is logged, recorded as a diagnostic and skipped.

    Args:
        obj: Object to convert
        correlation_id: Optional correlation ID for request tracking

    Returns:
        ConversionResult holding the root node and any diagnostics
    """
    logger = get_logger(__name__, correlation_id, COMPONENT)
    root = XmlNode(type(obj).__name__)
    result = ConversionResult(node=root, correlation_id=correlation_id)

    previous: Optional[XmlNode] = None
    for name, read in _field_readers(obj):
        try:
            value = read()
        except Exception as e:
            logger.warning(
                f"Skipping field '{name}' of {root.name}: {e}",
                extra={"field": name},
                exc_info=True,
            )
            result.skipped_fields.append(name)
            result.add_diagnostic(
                DiagnosticSeverity.WARNING,
                f"Field '{name}' could not be read and was skipped",
                COMPONENT,
                details={"field": name, "error": str(e), "error_type": type(e).__name__},
            )
            continue

        if previous is None:
            previous = root.child(name, value)
        else:
            previous = previous.next(name, value)

    logger.debug(
        f"Converted {root.name} with {result.field_count} fields",
        extra={"skipped": len(result.skipped_fields)},
    )
    return result


def object_to_xml(obj: Any, config: Optional[RenderConfig] = None) -> str:
    """Convert an object to an XML string without a declaration."""
    return convert_object(obj).render(config)


def object_to_xml_with_header(
    obj: Any,
    version: str = DEFAULT_VERSION,
    encoding: str = DEFAULT_ENCODING,
    config: Optional[RenderConfig] = None,
) -> str:
    """Convert an object to an XML string preceded by an XML declaration."""
    return header(version, encoding) + object_to_xml(obj, config)
