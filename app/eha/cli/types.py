"""Shared types and utilities for CLI commands.

This module resolves the effective settings of an invocation (command-line
options over environment over config file over built-in defaults) and runs
requests with uniform error reporting.
"""

import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

import typer
from rich.markup import escape

from eha.core.config import EhaConfig, load_config
from eha.core.errors import EhaError
from eha.core.runner import RunResult, run_request
from eha.models.request import Request
from eha.utils.formatting import print_error_chain, print_info, print_success


@dataclass(frozen=True, slots=True)
class CliSettings:
    """Effective settings for one invocation.

    Attributes:
        hosts_file: Hosts file to operate on.
        dry_run: Print the new contents instead of writing them.
        quiet: Suppress non-essential output.
        config: Loaded configuration (for command defaults).
    """

    hosts_file: Path
    dry_run: bool
    quiet: bool
    config: EhaConfig


def get_settings(ctx: typer.Context) -> CliSettings:
    """Resolve settings from the global options stored on the context.

    Loads the config file lazily so commands that don't need it (and
    ``config init`` repairing a broken file) are not blocked by it.

    Raises:
        typer.Exit: If the config file cannot be loaded.
    """
    obj = ctx.find_root().obj or {}
    try:
        config = load_config(obj.get("config_path"))
    except EhaError as e:
        print_error_chain(e)
        raise typer.Exit(code=1) from e

    hosts_file = obj.get("hosts_file") or config.hosts_file
    return CliSettings(
        hosts_file=Path(hosts_file),
        dry_run=bool(obj.get("dry_run", False)),
        quiet=bool(obj.get("quiet", False)),
        config=config,
    )


def current_origin() -> str:
    """Working directory recorded in the comment of added entries."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def execute(settings: CliSettings, request: Request) -> RunResult:
    """Run a request and report the outcome.

    In dry-run mode the new hosts contents are echoed verbatim to stdout.

    Args:
        settings: Effective invocation settings.
        request: Operation to apply.

    Returns:
        The RunResult of the request.

    Raises:
        typer.Exit: With code 1 on validation or I/O failure.
    """
    try:
        result = run_request(
            settings.hosts_file,
            request,
            now=datetime.now(UTC),
            dry_run=settings.dry_run,
        )
    except EhaError as e:
        print_error_chain(e)
        raise typer.Exit(code=1) from e

    if settings.dry_run:
        typer.echo(result.content)
        return result

    if not settings.quiet:
        summary = result.summary
        if summary.expired:
            print_info(f"Pruned {summary.expired} expired entr{'y' if summary.expired == 1 else 'ies'}.")
        print_success(f"Updated {escape(str(settings.hosts_file))}")

    return result
