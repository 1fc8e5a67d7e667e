"""CLI commands for eha.

This package contains all subcommand implementations.
"""

from eha.cli.commands import add, config, list_entries, prune, remove

__all__ = ["add", "config", "list_entries", "prune", "remove"]
