"""Base exception for eha.

Module-specific errors (validation, hosts file I/O, configuration) derive
from EhaError so the CLI can report them uniformly.
"""


class EhaError(Exception):
    """Base exception for all eha errors."""
