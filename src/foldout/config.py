"""Foldout configuration system.

Configuration is YAML-based with minimal CLI overrides (--output, --format,
--title, --lenient, --ci). Supports environment variable substitution (${VAR})
in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.foldout/config.yaml
3. ./foldout.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

OUTPUT_FORMATS = ("html", "markdown", "toc")

# Used when --format overrides the configured format but not the path
FORMAT_SUFFIXES = {
    "html": ".html",
    "markdown": ".md",
    "toc": ".md",
}

ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        path: Output file path
        format: Output format (html, markdown, toc)
    """

    path: str = "docs/principles.html"
    format: str = "html"

    def __post_init__(self) -> None:
        """Validate output configuration."""
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(f"Invalid output format: {self.format}. Valid: {OUTPUT_FORMATS}")


@dataclass
class RenderConfig:
    """Rendering configuration.

    Attributes:
        strict: Halt on the first malformed section (False skips and reports)
        title: Document title shown above the sections
        toc: Whether to include a table of contents
    """

    strict: bool = True
    title: str = "Design Principles"
    toc: bool = True


@dataclass
class CIConfig:
    """Settings for non-interactive runs.

    Attributes:
        fail_on_warning: Exit with error if sections were skipped
        json_output: Use JSON output format for reports
    """

    fail_on_warning: bool = False
    json_output: bool = False


@dataclass
class FoldoutConfig:
    """Top-level Foldout configuration.

    Attributes:
        output: Output path and format
        render: Strictness, title and table of contents
        ci: CI/CD settings
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    ci: CIConfig = field(default_factory=CIConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Config file this configuration was read from, if any."""
        return self._config_path


def substitute_env_vars(value: Any) -> Any:
    """Expand ${NAME} references from the environment, recursively.

    Strings are expanded in place; dicts and lists are walked. A reference
    to an unset variable is a configuration error.

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, dict):
        return {key: substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    if not isinstance(value, str):
        return value

    def expand(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in os.environ:
            raise ValueError(f"Environment variable not set: {name}")
        return os.environ[name]

    return ENV_VAR_RE.sub(expand, value)


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Return the first of .foldout/config.yaml or foldout.yaml under start_path."""
    base = (start_path or Path.cwd()).resolve()
    for candidate in (base / ".foldout" / "config.yaml", base / "foldout.yaml"):
        if candidate.is_file():
            return candidate
    return None


def load_config_from_dict(data: dict[str, Any]) -> FoldoutConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        FoldoutConfig instance

    Raises:
        ValueError: If a value is invalid or an env var is missing
    """
    data = substitute_env_vars(data)

    config = FoldoutConfig()

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            path=output_data.get("path", config.output.path),
            format=output_data.get("format", config.output.format),
        )

    if "render" in data:
        render_data = data["render"] or {}
        config.render = RenderConfig(
            strict=bool(render_data.get("strict", config.render.strict)),
            title=str(render_data.get("title", config.render.title)),
            toc=bool(render_data.get("toc", config.render.toc)),
        )

    if "ci" in data:
        ci_data = data["ci"] or {}
        config.ci = CIConfig(
            fail_on_warning=ci_data.get("fail_on_warning", False),
            json_output=ci_data.get("json_output", False),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> FoldoutConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        FoldoutConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = FoldoutConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# Foldout Configuration

# Output settings
output:
  path: "docs/principles.html"
  format: "html"  # html, markdown, toc

# Rendering settings
render:
  strict: true    # false: skip malformed sections and report them
  title: "Design Principles"
  toc: true

# CI/CD settings
ci:
  fail_on_warning: false
  json_output: false
'''
