"""
Tests for generator configuration loading.
"""
import json
import logging

import pytest

from pg_typegen.codegen import resolve_config
from pg_typegen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


@pytest.fixture
def config_file(tmp_path):
    """A JSON configuration file."""
    path = tmp_path / "typegen.json"
    path.write_text(
        json.dumps({"schema_name": "billing", "indent_size": 2, "add_comments": False}),
        encoding="utf-8",
    )
    return path


class TestGeneratorConfig:
    """Tests for the configuration dataclass."""

    def test_defaults(self, config):
        """Defaults target the public schema with comments on."""
        assert config.schema_name == "public"
        assert config.type_source == "data_type"
        assert config.add_comments is True
        assert config.use_profile_fallback is False
        assert config.indent == "    "

    def test_tab_indent(self):
        """use_tabs overrides indent_size."""
        assert GeneratorConfig(indent_size=2, use_tabs=True).indent == "\t"


class TestConfigManager:
    """Tests for merging defaults, files and overrides."""

    def test_file_values(self, config_file):
        """Values from the file replace defaults."""
        config = load_config(config_file=config_file)
        assert config.schema_name == "billing"
        assert config.indent_size == 2
        assert config.add_comments is False

    def test_overrides_beat_file(self, config_file):
        """Explicit overrides take precedence over the file."""
        config = load_config({"schema_name": "audit"}, config_file)
        assert config.schema_name == "audit"
        assert config.indent_size == 2

    def test_missing_file(self, tmp_path):
        """A missing file is a ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "nope.json")

    def test_non_json_suffix(self, tmp_path):
        """Only .json files are accepted."""
        path = tmp_path / "typegen.yaml"
        path.write_text("schema_name: x", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        """Malformed JSON is a ConfigError."""
        path = tmp_path / "typegen.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_json_must_be_object(self, tmp_path):
        """The file must hold a JSON object."""
        path = tmp_path / "typegen.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)

    def test_indent_size_type(self):
        """indent_size must be an integer."""
        with pytest.raises(ConfigError, match="indent_size"):
            load_config({"indent_size": "4"})
        with pytest.raises(ConfigError, match="indent_size"):
            load_config({"indent_size": True})

    def test_unknown_keys_go_to_custom(self, caplog):
        """Unknown keys are kept in custom and reported."""
        with caplog.at_level(logging.WARNING, logger="pg_typegen"):
            config = load_config({"emit_docs": True})
        assert config.custom == {"emit_docs": True}
        assert "emit_docs" in caplog.text

    def test_validate_config(self):
        """validate_config reports suspicious values."""
        warnings = ConfigManager().validate_config(
            GeneratorConfig(indent_size=-1, type_source="oid", schema_name="")
        )
        assert "Invalid indent_size: -1" in warnings
        assert "Invalid type_source: oid" in warnings
        assert "Empty schema_name" in warnings

    def test_save_and_reload(self, tmp_path):
        """Saved configuration loads back to an equal config."""
        original = GeneratorConfig(
            schema_name="audit", use_tabs=True, custom={"emit_docs": True}
        )
        path = tmp_path / "saved.json"
        manager = ConfigManager()
        manager.save_config(original, path)

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert "custom" not in saved
        assert saved["emit_docs"] is True

        assert manager.get_config(config_file=path) == original


class TestResolveConfig:
    """Tests for accepted config forms."""

    def test_passthrough(self, config):
        """A GeneratorConfig is used as-is."""
        assert resolve_config(config) is config

    def test_dict(self):
        """A dict is treated as overrides."""
        assert resolve_config({"use_tabs": True}).use_tabs is True

    def test_path(self, config_file):
        """A path is loaded as a config file."""
        assert resolve_config(str(config_file)).schema_name == "billing"

    def test_none(self):
        """None gives the defaults."""
        assert resolve_config(None) == GeneratorConfig()

    def test_invalid(self):
        """Other types are rejected."""
        with pytest.raises(ConfigError):
            resolve_config(42)
