"""Object-to-XML conversion API."""

from .objects import (
    convert_object,
    iter_object_fields,
    object_to_xml,
    object_to_xml_with_header,
)

__all__ = [
    "convert_object",
    "iter_object_fields",
    "object_to_xml",
    "object_to_xml_with_header",
]
