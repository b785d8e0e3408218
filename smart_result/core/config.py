"""Typed configuration loading.

A config file is optional; every value has a default. Layout:

    [diagnostics]
    enabled = true
    traceback = true
    show_locals = false
    width = 100

    [check]
    allow_reserved = false
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_table

__all__ = [
    "Config",
    "ConfigError",
    "CheckConfig",
    "DiagnosticsConfig",
    "DEFAULT_CONFIG_NAME",
    "load_config",
    "load_config_or_default",
]

DEFAULT_CONFIG_NAME = "smart-result.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    """How swallowed exceptions are reported.

    Attributes:
        enabled: False routes diagnostics to a sink that drops them.
        traceback: Print a full traceback after the one-line summary.
        show_locals: Include frame locals in tracebacks.
        width: Console width; None lets Rich detect it.
    """

    enabled: bool = True
    traceback: bool = True
    show_locals: bool = False
    width: int | None = None


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Catalog audit settings."""

    allow_reserved: bool = False


def _bool_or(table: Mapping[str, object], key: str, default: bool) -> bool:
    value = get_bool(table, key)
    return default if value is None else value


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    check: CheckConfig = field(default_factory=CheckConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If width is present but not a positive integer.
        """
        diagnostics: StrDict = get_table(data, "diagnostics") or {}
        check: StrDict = get_table(data, "check") or {}

        width = get_int(diagnostics, "width")
        if "width" in diagnostics and (width is None or width <= 0):
            raise ValueError(f"diagnostics.width must be a positive integer, got {diagnostics['width']!r}")

        defaults = DiagnosticsConfig()
        return cls(
            diagnostics=DiagnosticsConfig(
                enabled=_bool_or(diagnostics, "enabled", defaults.enabled),
                traceback=_bool_or(diagnostics, "traceback", defaults.traceback),
                show_locals=_bool_or(diagnostics, "show_locals", defaults.show_locals),
                width=width,
            ),
            check=CheckConfig(
                allow_reserved=_bool_or(check, "allow_reserved", CheckConfig().allow_reserved),
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config, falling back to defaults when the file is missing or invalid."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
