"""Typed configuration loading and access.

This module provides dataclasses for the elist.toml structure. Loading
failures are raised as ErrorChain traces, with the underlying OSError or
TOMLDecodeError adopted at the bottom of the chain.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeGuard, cast

from .chain import ErrorChain, newf, push, pushf

__all__ = [
    "Config",
    "OutputConfig",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_NAME",
    "load_config",
    "load_config_or_default",
    "resolve_config_path",
]

CONFIG_ENV_VAR = "ELIST_CONFIG"
DEFAULT_CONFIG_NAME = "elist.toml"

StrDict = dict[str, object]


def _is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def _get_table(table: Mapping[str, object], key: str) -> StrDict:
    value = table.get(key, {})
    if not _is_str_dict(value):
        raise newf("[%s] must be a table, got %T", key, value)
    return value


def _get_bool(table: Mapping[str, object], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise newf("%s must be a boolean, got %T", key, value)
    return value


def _get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripping whitespace. Empty strings become None."""
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise newf("%s must be a string, got %T", key, value)
    return value.strip() or None


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """How traces are printed by the CLI."""

    color: bool = True
    header: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        output = _get_table(data, "output")
        try:
            return cls(
                output=OutputConfig(
                    color=_get_bool(output, "color", True),
                    header=_get_str(output, "header"),
                ),
            )
        except ErrorChain as e:
            raise push(e, "invalid [output] table") from e


def _parse_toml(path: Path) -> StrDict:
    """Parse a TOML file, turning read and parse errors into a chain."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError as e:
        raise pushf(e, "config file not found: %s", path) from e
    except PermissionError as e:
        raise pushf(e, "permission denied reading: %s", path) from e
    except tomllib.TOMLDecodeError as e:
        raise pushf(e, "invalid TOML syntax in %s", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise pushf(e, "error reading config: %s", path) from e

    if not _is_str_dict(data_obj):
        raise newf("config root must be a TOML table: %s", path)
    return data_obj


def load_config(path: Path) -> Config:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to elist.toml

    Returns:
        The parsed Config.

    Raises:
        ErrorChain: If the file cannot be read or has an invalid structure.
    """
    data = _parse_toml(path)
    try:
        return Config.from_dict(data)
    except ErrorChain as e:
        raise pushf(e, "invalid config structure: %s", path) from e


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config if it doesn't exist.

    Any other failure propagates.
    """
    if not path.exists():
        return Config()
    return load_config(path)


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Pick the config file: explicit path, then $ELIST_CONFIG, then ./elist.toml."""
    if explicit is not None:
        return explicit.expanduser()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_NAME
