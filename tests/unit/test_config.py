"""Unit tests for configuration system."""

from pathlib import Path
from typing import Any

import pytest
import yaml

from foldout.config import (
    FORMAT_SUFFIXES,
    OUTPUT_FORMATS,
    OutputConfig,
    create_default_config,
    find_config_file,
    load_config,
    load_config_from_dict,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Tests for environment variable substitution."""

    def test_substitute_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env var in string."""
        monkeypatch.setenv("DOCS_TITLE", "Principles")

        result = substitute_env_vars("Team ${DOCS_TITLE}")

        assert result == "Team Principles"

    def test_substitute_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env vars in nested dicts and lists."""
        monkeypatch.setenv("OUT_DIR", "build")

        result = substitute_env_vars({"output": {"path": "${OUT_DIR}/x.html"}, "l": ["${OUT_DIR}"]})

        assert result == {"output": {"path": "build/x.html"}, "l": ["build"]}

    def test_missing_env_var_raises(self) -> None:
        """Test that missing env var raises ValueError."""
        with pytest.raises(ValueError, match="Environment variable not set"):
            substitute_env_vars("${FOLDOUT_NONEXISTENT_VAR}")

    def test_passthrough_non_string(self) -> None:
        """Test that non-string values pass through unchanged."""
        assert substitute_env_vars(123) == 123
        assert substitute_env_vars(True) is True
        assert substitute_env_vars(None) is None

    def test_text_without_references_unchanged(self) -> None:
        """Test that strings without ${...} are returned as-is."""
        assert substitute_env_vars("docs/$HOME/{x}.html") == "docs/$HOME/{x}.html"

    def test_multiple_references(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test expanding several variables in one value."""
        monkeypatch.setenv("A", "one")
        monkeypatch.setenv("B", "two")

        assert substitute_env_vars("${A}-${B}") == "one-two"


class TestFormatSuffixes:
    """Tests for per-format file suffixes."""

    def test_every_format_has_suffix(self) -> None:
        """Test that each output format maps to a suffix."""
        assert set(FORMAT_SUFFIXES) == set(OUTPUT_FORMATS)
        assert FORMAT_SUFFIXES["markdown"] == ".md"


class TestFindConfigFile:
    """Tests for config file discovery."""

    def test_find_foldout_dir_config(self, tmp_path: Path) -> None:
        """Test finding .foldout/config.yaml."""
        config_dir = tmp_path / ".foldout"
        config_dir.mkdir()
        config_file = config_dir / "config.yaml"
        config_file.write_text("output:\n  format: toc")

        assert find_config_file(tmp_path) == config_file

    def test_find_root_config(self, tmp_path: Path) -> None:
        """Test finding foldout.yaml at root."""
        config_file = tmp_path / "foldout.yaml"
        config_file.write_text("output:\n  format: toc")

        assert find_config_file(tmp_path) == config_file

    def test_prefer_foldout_dir_over_root(self, tmp_path: Path) -> None:
        """Test .foldout/config.yaml is preferred over foldout.yaml."""
        config_dir = tmp_path / ".foldout"
        config_dir.mkdir()
        preferred = config_dir / "config.yaml"
        preferred.write_text("# preferred")
        (tmp_path / "foldout.yaml").write_text("# fallback")

        assert find_config_file(tmp_path) == preferred

    def test_no_config_returns_none(self, tmp_path: Path) -> None:
        """Test returns None when no config found."""
        assert find_config_file(tmp_path) is None


class TestLoadConfigFromDict:
    """Tests for loading config from dictionary."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = load_config_from_dict({})

        assert config.output.path == "docs/principles.html"
        assert config.output.format == "html"
        assert config.render.strict is True
        assert config.render.toc is True
        assert config.ci.json_output is False

    def test_minimal_config(self, minimal_config: dict[str, Any]) -> None:
        """Test loading a minimal config."""
        config = load_config_from_dict(minimal_config)

        assert config.output.format == "html"
        assert config.render.title == "Design Principles"

    def test_full_config(self, full_config: dict[str, Any]) -> None:
        """Test loading every option."""
        config = load_config_from_dict(full_config)

        assert config.output.path == "build/principles.md"
        assert config.output.format == "markdown"
        assert config.render.strict is False
        assert config.render.title == "Principles"
        assert config.render.toc is False
        assert config.ci.fail_on_warning is True
        assert config.ci.json_output is True

    def test_invalid_format(self) -> None:
        """Test that an unknown output format is rejected."""
        with pytest.raises(ValueError, match="Invalid output format"):
            load_config_from_dict({"output": {"format": "pdf"}})

    def test_empty_sections_use_defaults(self) -> None:
        """Test that null sections fall back to defaults."""
        config = load_config_from_dict({"output": None, "render": None})

        assert config.output.format == "html"
        assert config.render.strict is True


class TestOutputConfig:
    """Tests for OutputConfig validation."""

    def test_valid_formats(self) -> None:
        """Test that every supported format is accepted."""
        for fmt in ("html", "markdown", "toc"):
            assert OutputConfig(format=fmt).format == fmt


class TestLoadConfig:
    """Tests for loading config files."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test loading an explicit config file."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("render:\n  title: Custom\n")

        config = load_config(config_path=config_file)

        assert config.render.title == "Custom"
        assert config.config_path == config_file

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        """Test that a missing explicit config raises."""
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "nope.yaml")

    def test_no_discovery(self) -> None:
        """Test defaults when discovery is disabled."""
        config = load_config(auto_discover=False)

        assert config.config_path is None

    def test_default_config_is_loadable(self) -> None:
        """Test that the generated default config parses to defaults."""
        data = yaml.safe_load(create_default_config())

        config = load_config_from_dict(data)

        assert config.output.format == "html"
        assert config.render.strict is True
