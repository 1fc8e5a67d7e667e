"""Remove command."""

from typing import Annotated

import typer
from rich.markup import escape

from eha.cli.types import execute, get_settings
from eha.models.request import RemoveRequest
from eha.utils.formatting import print_info


def remove(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(help="The DNS name ending in .local or .localhost to remove."),
    ],
) -> None:
    """Remove every managed entry for a name.

    Only lines added by eha are affected; other lines with the same name
    are left alone.
    """
    settings = get_settings(ctx)
    result = execute(settings, RemoveRequest(name=name))

    if result.written and not settings.quiet and not result.summary.removed:
        print_info(f"No live entry for {escape(name)} was present.")
