"""Render configuration for XML document building.

Indentation width and the two escaping tables are carried by an immutable
``RenderConfig`` that is passed to every render call, so concurrent renders
with different settings never interfere with each other.
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

from simple_xml_builder.character.escaping import (
    AMPERSAND,
    ATTRIBUTE_ESCAPES,
    TEXT_ESCAPES,
)

DEFAULT_INDENT = 2


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


def _default_table(table: Dict[str, str]) -> Dict[str, str]:
    return {literal: value for literal, value in table.items() if literal != AMPERSAND}


def _validate_escape_table(field_name: str, table: Dict[str, str]) -> None:
    for literal, replacement in table.items():
        if not isinstance(literal, str) or not isinstance(replacement, str):
            raise ConfigValidationError(
                f"{field_name} entries must map strings to strings",
                field_name=field_name,
            )
        if not literal:
            raise ConfigValidationError(
                f"{field_name} cannot contain an empty literal",
                field_name=field_name,
            )
        if literal == AMPERSAND:
            raise ConfigValidationError(
                f"{field_name} cannot redefine '&', it is always escaped first",
                field_name=field_name,
                suggestions=[f"Remove the '&' entry from {field_name}"],
            )


@dataclass(frozen=True)
class RenderConfig:
    """Immutable settings that control how a node tree is rendered.

    Thread-safe due to frozen dataclass implementation. The escape tables are
    copied on construction, so mutating the dictionaries passed in does not
    affect an existing configuration; use ``override`` to derive a new one.
    """

    indent: int = DEFAULT_INDENT
    text_escapes: Dict[str, str] = field(
        default_factory=lambda: _default_table(TEXT_ESCAPES)
    )
    attribute_escapes: Dict[str, str] = field(
        default_factory=lambda: _default_table(ATTRIBUTE_ESCAPES)
    )

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate and detach the configuration from caller-owned tables."""
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ConfigValidationError("indent must be an integer", field_name="indent")
        if self.indent < 0:
            raise ConfigValidationError(
                "indent must be >= 0",
                field_name="indent",
                suggestions=["Use 0 to put every element at the start of its line"],
            )

        _validate_escape_table("text_escapes", self.text_escapes)
        _validate_escape_table("attribute_escapes", self.attribute_escapes)

        object.__setattr__(self, "text_escapes", dict(self.text_escapes))
        object.__setattr__(self, "attribute_escapes", dict(self.attribute_escapes))

    def override(self, **kwargs: Any) -> "RenderConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = RenderConfig()
            >>> config.override(indent=1).indent
            1
        """
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            item.name: (
                dict(getattr(self, item.name))
                if isinstance(getattr(self, item.name), dict)
                else getattr(self, item.name)
            )
            for item in fields(self)
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected rather than ignored so that typos in
        configuration files surface immediately.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a JSON object")

        known = {item.name for item in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=[f"Valid fields are: {', '.join(sorted(known))}"],
            )
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "RenderConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "RenderConfig":
        """Two-space indentation with the standard escape tables."""
        return cls(name="default")

    @classmethod
    def compact(cls) -> "RenderConfig":
        """One-space indentation, as used by the demonstration output."""
        return cls(
            indent=1,
            name="compact",
            description="Single space per nesting level",
        )
