#!/usr/bin/env python3
"""
Quick Start Guide for Simple XML Builder.

Builds a small catalogue document, renders it with two indentation settings
and converts a plain object to XML.
"""

import sys
from dataclasses import dataclass
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from simple_xml_builder import RenderConfig, XmlNode, convert_object


@dataclass
class Book:
    isbn: str
    title: str
    price: float


def build_catalogue() -> XmlNode:
    """Build a catalogue with two books using chained calls."""
    catalogue = XmlNode("catalogue").attr("source", "R&D \"shelf\"")
    book = catalogue.child("book").attr("id", "bk101")
    book.child("title", "XML Developer's Guide").next("price", 44.95)
    book.next("book").attr("id", "bk102").child("title", "Midnight <Rain>")
    return catalogue


def quick_start_example():
    """Quick start example showing basic usage."""
    print("QUICK START - Simple XML Builder")
    print("=" * 33)

    catalogue = build_catalogue()

    print("\nStep 1: Default rendering")
    print("-" * 30)
    print(catalogue.with_header())

    print("\nStep 2: Compact rendering with a DOCTYPE")
    print("-" * 30)
    print(catalogue.with_header(doctype='SYSTEM "catalogue.dtd"', config=RenderConfig.compact()))

    print("\nStep 3: Object conversion")
    print("-" * 30)
    result = convert_object(Book("0-596-00128-2", "Python & XML", 34.95))
    print(result.render())
    print(f"Converted {result.field_count} fields, success={result.success}")


if __name__ == "__main__":
    quick_start_example()
