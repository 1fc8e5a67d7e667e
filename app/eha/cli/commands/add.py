"""Add command.

Maps a name to the loopback address until its time-to-live runs out.
"""

from typing import Annotated

import typer
from rich.markup import escape

from eha.cli.types import current_origin, execute, get_settings
from eha.models.request import AddRequest
from eha.utils.formatting import print_info


def add(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(help="The DNS name ending in .local or .localhost to add."),
    ],
    ttl_minutes: Annotated[
        int | None,
        typer.Option(
            "--ttl",
            "--expire-minutes",
            "-e",
            help="Minutes until the entry is subject to removal (1-525600). Defaults to 1440.",
            show_default=False,
        ),
    ] = None,
    replace: Annotated[
        bool | None,
        typer.Option(
            "--replace/--no-replace",
            help="Drop live entries with the same name before adding.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Add a temporary name pointing at 127.0.0.1.

    Expired entries are pruned as part of every run.

    Examples:
        eha add myapp.local              # Expires in one day
        eha add api.myapp.localhost -e 60
        eha --dry-run add myapp.local    # Print the result only
    """
    settings = get_settings(ctx)

    request = AddRequest(
        name=name,
        ttl_minutes=ttl_minutes if ttl_minutes is not None else settings.config.ttl_minutes,
        origin=current_origin(),
        replace=replace if replace is not None else settings.config.replace_existing,
    )

    result = execute(settings, request)

    if result.written and not settings.quiet:
        print_info(f"{escape(name)} -> 127.0.0.1 for {request.ttl_minutes} minute(s)")
