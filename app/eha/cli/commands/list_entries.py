"""List command.

Shows the managed entries of the hosts file without modifying it.
"""

from datetime import UTC, datetime
from typing import Annotated

import typer
from rich.markup import escape

from eha.cli.types import get_settings
from eha.core.errors import EhaError
from eha.core.hosts import read_hosts
from eha.utils.formatting import (
    console,
    create_entries_table,
    format_entry_row,
    print_error_chain,
    print_info,
)


def list_entries(
    ctx: typer.Context,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include expired entries."),
    ] = False,
) -> None:
    """List names managed by eha."""
    settings = get_settings(ctx)

    try:
        store = read_hosts(settings.hosts_file)
    except EhaError as e:
        print_error_chain(e)
        raise typer.Exit(code=1) from e

    now = datetime.now(UTC)
    entries = store.managed()
    if not show_all:
        entries = [entry for entry in entries if not entry.is_expired(now)]

    hosts_file = escape(str(settings.hosts_file))
    if not entries:
        print_info(f"No managed entries in {hosts_file}.")
        return

    table = create_entries_table(title=f"Managed Entries ({hosts_file})")
    for entry in entries:
        table.add_row(*format_entry_row(entry, now))
    console.print(table)
