"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from eha import __version__
from eha.cli.commands import add, config, list_entries, prune, remove
from eha.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="eha",
    help="Add, remove, or expire temporary localhost names in the hosts file.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"eha version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    hosts_file: Annotated[
        Path | None,
        typer.Option(
            "--hosts-file",
            "--input-file",
            "-f",
            envvar="EHA_HOSTS_FILE",
            help="Operate on the given hosts file. Defaults to /etc/hosts.",
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "--test",
            "-n",
            help="Print the new content to stdout instead of writing the file.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Read settings from this config file. Defaults to ~/.config/eha/config.toml.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """eha (etc-hosts-adder) - temporary localhost names in the hosts file.

    Names ending in .local or .localhost are mapped to 127.0.0.1 with an
    expiry. Expired names are removed on every run; all other lines are
    left untouched.
    """
    configure_logging(verbose=verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["hosts_file"] = hosts_file
    ctx.obj["dry_run"] = dry_run
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="add")(add.add)
app.command(name="remove")(remove.remove)
app.command(name="prune")(prune.prune)
app.command(name="list")(list_entries.list_entries)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
