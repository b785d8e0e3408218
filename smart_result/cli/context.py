from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console

from smart_result.core.config import DEFAULT_CONFIG_NAME, Config, load_config
from smart_result.core.errors import ExitCode
from smart_result.core.result import Err


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: Console


def resolve_config(path: Path | None) -> Config:
    """Load an explicit config path, else ./smart-result.toml if present.

    An explicit path that cannot be loaded is fatal; a missing default file
    means defaults.
    """
    if path is None:
        default = Path.cwd() / DEFAULT_CONFIG_NAME
        if not default.exists():
            return Config()
        path = default

    result = load_config(path)
    if isinstance(result, Err):
        typer.echo(f"error: {result.error.message}", err=True)
        raise typer.Exit(code=int(ExitCode.CONFIG_ERROR))
    return result.value


def build_context(config_path: Path | None = None) -> CLIContext:
    return CLIContext(config=resolve_config(config_path), console=Console())
