from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from smart_result.cli.context import CLIContext, build_context
from smart_result.core.catalog import (
    CatalogIssue,
    audit_catalog,
    describe_catalog,
    load_catalog,
)
from smart_result.core.errors import ExitCode
from smart_result.core.result import Err

catalog_app = typer.Typer(no_args_is_help=True, help="Inspect error catalogs.")


def _load_or_exit(ref: str) -> type[Enum]:
    result = load_catalog(ref)
    if isinstance(result, Err):
        typer.echo(f"error: {result.error.ref}: {result.error.message}", err=True)
        raise typer.Exit(code=int(ExitCode.USER_ERROR))
    return result.value


@catalog_app.command("show")
def show(
    ref: str = typer.Argument(..., help="Catalog reference, e.g. myapp.errors:UserFailCode"),
) -> None:
    """List a catalog's entries sorted by code."""
    ctx = build_context()
    catalog = _load_or_exit(ref)

    table = Table(title=catalog.__name__)
    table.add_column("Name")
    table.add_column("Code", justify="right")
    table.add_column("Args", justify="right")
    table.add_column("Template")
    for row in describe_catalog(catalog):
        args = "?" if row.placeholders is None else str(row.placeholders)
        table.add_row(row.name, str(row.code), args, escape(row.description))
    ctx.console.print(table)


@catalog_app.command("check")
def check(
    ref: str = typer.Argument(..., help="Catalog reference, e.g. myapp.errors:UserFailCode"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file (default: ./smart-result.toml)"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as failures."),
) -> None:
    """Audit a catalog for codes and templates that misbehave at runtime."""
    ctx = build_context(config)
    catalog = _load_or_exit(ref)

    report = audit_catalog(catalog, allow_reserved=ctx.config.check.allow_reserved)
    for issue in report.issues:
        _print_issue(ctx, issue)

    summary = f"{report.catalog}: {report.entries} entries, {len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    if report.has_errors() or (strict and report.warnings):
        ctx.console.print(f"[red bold]FAILED[/red bold] {escape(summary)}")
        raise typer.Exit(code=int(ExitCode.CHECK_FAILED))
    ctx.console.print(f"[green]OK[/green] {escape(summary)}")


def _print_issue(ctx: CLIContext, issue: CatalogIssue) -> None:
    style = "red bold" if issue.is_error else "yellow"
    ctx.console.print(f"[{style}]{issue.severity}:[/{style}] {escape(issue.name)}: {escape(issue.message)}")
