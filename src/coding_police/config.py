"""Threshold configuration for Coding Police.

Configuration sources are merged in priority order (lowest to highest):
    1. Defaults (defined in Thresholds)
    2. Global config ($XDG_CONFIG_HOME/agentkit/config.toml)
    3. Project config (./coding-police.toml)
    4. Explicit config file
    5. Environment variables (CODING_POLICE_* prefix)
    6. Keyword overrides

Settings live in a ``[coding-police]`` table. Keys may be kebab-case
(``max-file-lines``) or snake_case (``max_file_lines``).

Example:
    >>> thresholds = load_config(max_file_lines=500)
    >>> thresholds.max_file_lines
    500
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigFileError, InvalidConfigError

SECTION = "coding-police"
ENV_PREFIX = "CODING_POLICE_"
PROJECT_CONFIG_NAME = "coding-police.toml"


@dataclass(frozen=True)
class Thresholds:
    """Limits the detectors compare against.

    Zero or negative limits are accepted and make the matching check report
    everything; they never disable a check.

    Attributes:
        max_file_lines: Files longer than this are reported
        max_function_lines: Functions longer than this are reported
        min_duplicate_lines: Smallest repeated block (in normalized lines) reported
        max_exports_per_file: JS/TS modules exporting more than this are reported
        exclude_patterns: Path substrings that skip the scan entirely
    """

    max_file_lines: int = 1000
    max_function_lines: int = 100
    min_duplicate_lines: int = 6
    max_exports_per_file: int = 15
    exclude_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "exclude_patterns":
                if not isinstance(value, (list, tuple)) or not all(isinstance(p, str) for p in value):
                    raise InvalidConfigError(f.name, value, "must be a list of strings")
                # Lists from TOML become tuples so the dataclass stays hashable
                object.__setattr__(self, f.name, tuple(value))
            elif isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(f.name, value, "must be an integer")


DEFAULT_THRESHOLDS = Thresholds()

_FIELD_NAMES = tuple(f.name for f in fields(Thresholds))


def global_config_path() -> Path:
    """Path of the shared agentkit config file."""
    xdg = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg) / "agentkit" / "config.toml"


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> Thresholds:
    """Load thresholds with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated Thresholds instance

    Raises:
        ConfigFileError: If a config file is missing or not valid TOML
        InvalidConfigError: If a key is unknown or a value has the wrong type
    """
    merged: dict[str, Any] = {}

    for candidate in (global_config_path(), Path.cwd() / PROJECT_CONFIG_NAME):
        if candidate.is_file():
            merged.update(_load_section(candidate))

    if config_file is not None:
        if not config_file.is_file():
            raise ConfigFileError(config_file, "file not found")
        merged.update(_load_section(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    return Thresholds(**merged)


def _normalize_key(key: str) -> str:
    name = key.replace("-", "_")
    if name not in _FIELD_NAMES:
        raise InvalidConfigError(key, key, f"unknown setting, expected one of {', '.join(_FIELD_NAMES)}")
    return name


def _load_section(path: Path) -> dict[str, Any]:
    """Read the ``[coding-police]`` table of a TOML file (empty if absent)."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileError(path, str(e)) from e

    section = data.get(SECTION, {})
    if not isinstance(section, dict):
        raise ConfigFileError(path, f"[{SECTION}] must be a table")
    return {_normalize_key(key): value for key, value in section.items()}


def _load_env_vars() -> dict[str, Any]:
    """Load thresholds from CODING_POLICE_* environment variables.

    Supported environment variables:
        CODING_POLICE_MAX_FILE_LINES: int
        CODING_POLICE_MAX_FUNCTION_LINES: int
        CODING_POLICE_MIN_DUPLICATE_LINES: int
        CODING_POLICE_MAX_EXPORTS_PER_FILE: int
        CODING_POLICE_EXCLUDE_PATTERNS: comma-separated path substrings
    """
    result: dict[str, Any] = {}

    for name in _FIELD_NAMES:
        env_key = f"{ENV_PREFIX}{name.upper()}"
        value = os.environ.get(env_key)
        if value is None:
            continue

        if name == "exclude_patterns":
            result[name] = tuple(p.strip() for p in value.split(",") if p.strip())
            continue
        try:
            result[name] = int(value)
        except ValueError:
            raise InvalidConfigError(env_key, value, "must be an integer")

    return result
