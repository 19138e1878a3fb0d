"""Comprehensive tests for the render configuration."""

import json

import pytest

from simple_xml_builder.character.escaping import TEXT_ESCAPES
from simple_xml_builder.shared.config import (
    ConfigError,
    ConfigValidationError,
    RenderConfig,
)
from simple_xml_builder.tree import XmlNode


class TestRenderConfigDefaults:
    """Test suite for default RenderConfig values."""

    def test_default_configuration(self):
        """Test default render configuration values."""
        config = RenderConfig()

        assert config.indent == 2
        assert config.text_escapes == {"<": "&lt;", ">": "&gt;"}
        assert config.attribute_escapes == {'"': "&quot;"}
        assert config.name is None
        assert config.description is None

    def test_presets(self):
        """Test preset factory methods."""
        assert RenderConfig.default().indent == 2
        assert RenderConfig.default().name == "default"
        assert RenderConfig.compact().indent == 1
        assert RenderConfig.compact().name == "compact"

    def test_config_is_frozen(self):
        """Test that configuration fields cannot be reassigned."""
        config = RenderConfig()

        with pytest.raises(AttributeError):
            config.indent = 4  # type: ignore[misc]


class TestRenderConfigValidation:
    """Test suite for RenderConfig validation."""

    def test_zero_indent_allowed(self):
        """Test that an indent of zero is valid."""
        assert RenderConfig(indent=0).indent == 0

    def test_negative_indent_rejected(self):
        """Test that a negative indent raises ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="indent must be >= 0") as excinfo:
            RenderConfig(indent=-1)

        assert excinfo.value.field_name == "indent"
        assert excinfo.value.suggestions

    def test_non_integer_indent_rejected(self):
        """Test that non-integer indents are rejected."""
        with pytest.raises(ConfigValidationError, match="indent must be an integer"):
            RenderConfig(indent="2")  # type: ignore[arg-type]
        with pytest.raises(ConfigValidationError, match="indent must be an integer"):
            RenderConfig(indent=True)

    def test_ampersand_entry_rejected(self):
        """Test that tables cannot redefine the ampersand escape."""
        with pytest.raises(ConfigValidationError, match="cannot redefine '&'") as excinfo:
            RenderConfig(text_escapes={"&": "&#38;"})

        assert excinfo.value.field_name == "text_escapes"

    def test_empty_literal_rejected(self):
        """Test that an empty literal in a table is rejected."""
        with pytest.raises(ConfigValidationError, match="empty literal"):
            RenderConfig(attribute_escapes={"": "x"})

    def test_non_string_entry_rejected(self):
        """Test that table entries must be strings."""
        with pytest.raises(ConfigValidationError, match="strings to strings"):
            RenderConfig(text_escapes={"<": 1})  # type: ignore[dict-item]

    def test_validation_error_is_config_error(self):
        """Test the exception hierarchy."""
        assert issubclass(ConfigValidationError, ConfigError)


class TestRenderConfigOverrides:
    """Test suite for overrides and table isolation."""

    def test_override_returns_new_instance(self):
        """Test that override leaves the original untouched."""
        config = RenderConfig()

        new_config = config.override(indent=1)

        assert new_config.indent == 1
        assert config.indent == 2
        assert new_config is not config

    def test_override_validates(self):
        """Test that overrides are validated like construction."""
        with pytest.raises(ConfigValidationError):
            RenderConfig().override(indent=-3)

    def test_tables_are_copied(self):
        """Test that mutating the caller's table does not affect the config."""
        table = {"<": "&lt;"}
        config = RenderConfig(text_escapes=table)

        table["'"] = "&apos;"

        assert config.text_escapes == {"<": "&lt;"}

    def test_default_config_ignores_ampersand_in_module_table(self, monkeypatch):
        """Test defaults stay valid when & is added to the module-level table."""
        monkeypatch.setitem(TEXT_ESCAPES, "&", "&amp;")

        config = RenderConfig()

        assert "&" not in config.text_escapes
        assert XmlNode("q", "a & b").render() == "<q>a &amp; b</q>"

    def test_ampersand_added_to_config_table_in_place(self):
        """Test an & entry added after validation still escapes & once."""
        config = RenderConfig()
        config.text_escapes["&"] = "&amp;"

        assert XmlNode("q", "a & b").render(config=config) == "<q>a &amp; b</q>"

    def test_default_tables_are_independent(self):
        """Test that two default configs do not share table objects."""
        first = RenderConfig()
        second = RenderConfig()

        assert first.text_escapes is not second.text_escapes


class TestRenderConfigSerialization:
    """Test suite for dict and JSON conversion."""

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = RenderConfig.compact().to_dict()

        assert data == {
            "indent": 1,
            "text_escapes": {"<": "&lt;", ">": "&gt;"},
            "attribute_escapes": {'"': "&quot;"},
            "name": "compact",
            "description": "Single space per nesting level",
        }

    def test_json_round_trip(self):
        """Test that a config survives JSON serialization."""
        config = RenderConfig(indent=4, text_escapes={"<": "&lt;", "'": "&apos;"})

        restored = RenderConfig.from_json(config.to_json())

        assert restored == config
        assert json.loads(config.to_json())["indent"] == 4

    def test_from_dict_partial(self):
        """Test that missing fields fall back to defaults."""
        config = RenderConfig.from_dict({"indent": 1})

        assert config.indent == 1
        assert config.attribute_escapes == {'"': "&quot;"}

    def test_from_dict_unknown_field(self):
        """Test that unknown fields are rejected with suggestions."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration fields: indnet") as excinfo:
            RenderConfig.from_dict({"indnet": 1})

        assert excinfo.value.field_name == "indnet"
        assert "indent" in excinfo.value.suggestions[0]

    def test_from_dict_requires_mapping(self):
        """Test that non-object data is rejected."""
        with pytest.raises(ConfigValidationError, match="must be a JSON object"):
            RenderConfig.from_dict([1, 2])  # type: ignore[arg-type]

    def test_from_json_invalid(self):
        """Test that malformed JSON raises ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="Invalid configuration JSON"):
            RenderConfig.from_json("{indent: 1")
