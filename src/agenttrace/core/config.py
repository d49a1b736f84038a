"""
Configuration for agenttrace.

Loads tracing settings from:
1. Project-level: ./agenttrace.toml or ./agenttrace.yaml
2. User-level: ~/.agenttrace/config.toml or ~/.agenttrace/config.yaml
3. Environment variables (TRACING_MODE, TRACING_COLORS, TRACING_OUTPUT,
   TRACING_INCLUDE, TRACING_EXCLUDE), including a .env file in the
   current directory

Priority: Explicit params > Environment vars > Config file > Defaults

Config files use a `tracing` table:

    [tracing]
    mode = "console"
    colors = true
    output = "logs/trace.log"
    exclude = ["token_usage_recorded"]
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from agenttrace.core.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_MODE = "TRACING_MODE"
ENV_COLORS = "TRACING_COLORS"
ENV_OUTPUT = "TRACING_OUTPUT"
ENV_INCLUDE = "TRACING_INCLUDE"
ENV_EXCLUDE = "TRACING_EXCLUDE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class TracingMode(str, Enum):
    """Which tracing implementation to build."""

    CONSOLE = "console"
    JSON = "json"
    NOOP = "noop"

    @classmethod
    def from_string(cls, value: str) -> TracingMode:
        """
        Parse a mode from string.

        "none" and "off" are accepted as aliases for noop.

        Raises:
            ConfigError: If the value is not a known mode
        """
        aliases = {"none": cls.NOOP, "off": cls.NOOP, "print": cls.CONSOLE}

        name = value.lower().strip()
        if name in aliases:
            return aliases[name]

        try:
            return cls(name)
        except ValueError:
            valid = [m.value for m in cls] + list(aliases.keys())
            raise ConfigError(
                f"Invalid tracing mode '{value}'. Valid modes: {', '.join(valid)}"
            ) from None


@dataclass
class FormatConfig:
    """
    Configuration for event formatting.

    Controls how events are rendered to strings.
    """

    use_colors: bool = True
    """Use ANSI markup for headers."""

    header_width: int = 60
    """Width of the '=' rule around full headers."""

    content_limit: int = 200
    """Max chars of completion content before truncation."""

    tool_io_limit: int = 100
    """Max chars of tool input/output before truncation."""


@dataclass
class TracingConfig:
    """Resolved tracing configuration."""

    mode: TracingMode = TracingMode.CONSOLE
    format: FormatConfig = field(default_factory=FormatConfig)

    output_path: Path | None = None
    """Append to this file instead of writing to stdout."""

    # Filters - glob patterns for event types
    include: list[str] | None = None
    """Only emit events matching these patterns (None = all)."""

    exclude: list[str] | None = None
    """Drop events matching these patterns."""


def find_config_file() -> Path | None:
    """Find configuration file in standard locations.

    Checks in order:
    1. ./agenttrace.toml
    2. ./agenttrace.yaml
    3. ~/.agenttrace/config.toml
    4. ~/.agenttrace/config.yaml

    Returns:
        Path to config file or None if not found
    """
    candidates = [
        Path.cwd() / "agenttrace.toml",
        Path.cwd() / "agenttrace.yaml",
        Path.home() / ".agenttrace" / "config.toml",
        Path.home() / ".agenttrace" / "config.yaml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def load_toml(path: Path) -> dict[str, Any]:
    """Load TOML configuration file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML configuration file."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load the `tracing` section of a config file.

    Args:
        path: Explicit file, or None to search the standard locations

    Returns:
        The tracing section, or an empty dict if no config was found

    Raises:
        ConfigError: If the file exists but cannot be parsed or is not a mapping
    """
    path = path or find_config_file()
    if path is None:
        return {}

    try:
        if path.suffix == ".toml":
            data = load_toml(path)
        elif path.suffix in (".yaml", ".yml"):
            data = load_yaml(path)
        else:
            raise ConfigError(f"Unsupported config file type: {path.name}")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    logger.debug("Loaded tracing config from %s", path)
    section = data.get("tracing", {})
    if not isinstance(section, dict):
        raise ConfigError(f"'tracing' in {path} must be a table")
    return section


def parse_bool(value: str | bool) -> bool:
    """Parse a boolean flag from env/config text."""
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise ConfigError(f"Invalid boolean value {value!r}")
    text = value.strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ConfigError(f"Invalid boolean value '{value}'")


def parse_patterns(value: str | list[str] | None) -> list[str] | None:
    """Parse a comma-separated pattern list (or pass a list through)."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(",")
    elif not isinstance(value, list) or not all(isinstance(p, str) for p in value):
        raise ConfigError(f"Invalid pattern list {value!r}")
    patterns = [p.strip() for p in value if p.strip()]
    return patterns or None


def load_tracing_config(
    *,
    mode: TracingMode | str | None = None,
    use_colors: bool | None = None,
    output_path: str | Path | None = None,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
    config_path: Path | None = None,
    load_env_file: bool = True,
) -> TracingConfig:
    """
    Resolve tracing configuration from arguments, environment, and files.

    Args:
        mode: Explicit tracing mode
        use_colors: Explicit color switch
        output_path: Explicit output file
        include: Explicit include patterns
        exclude: Explicit exclude patterns
        config_path: Config file to read instead of searching
        load_env_file: Load .env from the current directory first

    Returns:
        Resolved TracingConfig

    Raises:
        ConfigError: On invalid values in any source
    """
    if load_env_file:
        load_dotenv()

    file_config = load_config_file(config_path)

    def pick(explicit: Any, env_var: str, file_key: str) -> Any:
        if explicit is not None:
            return explicit
        env_value = os.environ.get(env_var)
        if env_value:
            return env_value
        return file_config.get(file_key)

    raw_mode = pick(mode, ENV_MODE, "mode")
    if isinstance(raw_mode, TracingMode):
        resolved_mode = raw_mode
    elif raw_mode is None:
        resolved_mode = TracingMode.CONSOLE
    else:
        resolved_mode = TracingMode.from_string(str(raw_mode))

    raw_colors = pick(use_colors, ENV_COLORS, "colors")
    format_config = FormatConfig(
        use_colors=True if raw_colors is None else parse_bool(raw_colors)
    )

    raw_output = pick(output_path, ENV_OUTPUT, "output")
    if raw_output is not None and not isinstance(raw_output, (str, Path)):
        raise ConfigError(f"Invalid output path {raw_output!r}")

    config = TracingConfig(
        mode=resolved_mode,
        format=format_config,
        output_path=Path(raw_output) if raw_output else None,
        include=parse_patterns(pick(include, ENV_INCLUDE, "include")),
        exclude=parse_patterns(pick(exclude, ENV_EXCLUDE, "exclude")),
    )
    logger.debug("Resolved tracing config: %s", config)
    return config
