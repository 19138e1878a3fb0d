"""Main CLI entry point for the simple-xml demonstration tool.

Prints example documents built with the node tree API, rendered with an
optional JSON render configuration.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from simple_xml_builder import __version__
from simple_xml_builder.api import object_to_xml, object_to_xml_with_header
from simple_xml_builder.shared.config import ConfigError, RenderConfig
from simple_xml_builder.shared.logging import get_logger
from simple_xml_builder.tree import XmlNode

logger = get_logger(__name__, None, "cli")

NESTED_EXAMPLE = "Element with children"


@dataclass
class SampleRecord:
    """Record used to demonstrate object conversion."""

    id: int = 123
    name: str = "Object converted to XML"
    created: date = field(default_factory=date.today)


def load_config(config_path: Optional[Path], indent: Optional[int] = None) -> RenderConfig:
    """Load a render configuration file and apply command-line overrides."""
    if config_path is None:
        config = RenderConfig()
    else:
        try:
            config = RenderConfig.from_json(config_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e

    if indent is not None:
        config = config.override(indent=indent)
    return config


def build_examples() -> List[Tuple[str, XmlNode]]:
    """Build the demonstration documents, each paired with a title."""
    examples = [
        ("Single element", XmlNode("root")),
        ("Element with text", XmlNode("root", "Single element")),
        (
            "Element with text and attribute",
            XmlNode("root", "Single element with attribute").attr("id", 1234),
        ),
    ]

    node = XmlNode("root").attr("title", "With children").child("br")
    node = node.next("br").attr("style", "clear:both")
    for item_id, value in enumerate(["", "def", "ghi"], start=1):
        node.next("item", value).attr("id", item_id)
    examples.append((NESTED_EXAMPLE, node))

    examples.append(
        (
            "Escaped characters",
            XmlNode("root", "<Escaped characters> & more").attr("id", '12"34&'),
        )
    )
    return examples


def cmd_demo(args: argparse.Namespace, config: RenderConfig) -> int:
    """Print every demonstration document.

    Unless an indent comes from the command line or a config file, the
    examples from "Element with children" onward use one space per level.
    """
    explicit = args.indent is not None or args.config is not None
    for title, node in build_examples():
        if title == NESTED_EXAMPLE and not explicit:
            config = config.override(indent=1)
        logger.debug(f"Rendering example: {title}", extra={"indent": config.indent})
        print(node.with_header(config=config))
        print()

    print(object_to_xml(SampleRecord(), config))
    print()
    return 0


def cmd_object(args: argparse.Namespace, config: RenderConfig) -> int:
    """Print the sample record converted to XML with a declaration."""
    print(
        object_to_xml_with_header(
            SampleRecord(), version=args.xml_version, encoding=args.encoding, config=config
        )
    )
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="simple-xml",
        description="Build and print example XML documents"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Render configuration file (JSON)"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    demo_parser = subparsers.add_parser("demo", help="Print example documents")
    demo_parser.add_argument(
        "--indent", "-i",
        type=int,
        help="Spaces per nesting level (overrides the config file)"
    )

    object_parser = subparsers.add_parser(
        "object", help="Print a sample object converted to XML"
    )
    object_parser.add_argument(
        "--indent", "-i",
        type=int,
        help="Spaces per nesting level (overrides the config file)"
    )
    object_parser.add_argument(
        "--xml-version",
        default="1.0",
        help="Version written in the XML declaration (default: 1.0)"
    )
    object_parser.add_argument(
        "--encoding",
        default="UTF-8",
        help="Encoding written in the XML declaration (default: UTF-8)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        config = load_config(args.config, args.indent)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        if args.command == "demo":
            return cmd_demo(args, config)
        elif args.command == "object":
            return cmd_object(args, config)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
