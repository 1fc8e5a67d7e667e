"""CLI package for eha.

This package contains the Typer application and all subcommands.
"""

from eha.cli.main import app

__all__ = ["app"]
