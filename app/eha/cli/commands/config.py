"""Configuration commands.

Shows the effective configuration and creates a default config file.
"""

from typing import Annotated

import typer
from rich.markup import escape

from eha.cli.types import get_settings
from eha.core.config import ConfigError, EhaConfig, save_config
from eha.core.paths import get_config_path
from eha.utils.formatting import console, print_error_chain, print_info, print_success

app = typer.Typer(
    help="Show or create the eha configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective settings."""
    settings = get_settings(ctx)
    config_path = (ctx.find_root().obj or {}).get("config_path") or get_config_path()

    console.print(f"[bold_header]Config file:[/] {escape(str(config_path))}")
    console.print(f"  hosts_file       = {escape(str(settings.hosts_file))}")
    console.print(f"  ttl_minutes      = {settings.config.ttl_minutes}")
    console.print(f"  replace_existing = {str(settings.config.replace_existing).lower()}")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    explicit_path = (ctx.find_root().obj or {}).get("config_path")
    config_path = explicit_path or get_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists: {escape(str(config_path))} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(EhaConfig(), explicit_path)
    except ConfigError as e:
        print_error_chain(e)
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {escape(str(saved))}")
