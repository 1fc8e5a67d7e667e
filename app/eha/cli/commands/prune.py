"""Prune command."""

import typer

from eha.cli.types import execute, get_settings
from eha.models.request import PruneRequest


def prune(ctx: typer.Context) -> None:
    """Remove expired entries and nothing else."""
    execute(get_settings(ctx), PruneRequest())
