"""Data models for eha.

This module exports the core data structures used throughout the application.
"""

from eha.models.entry import (
    LOOPBACK_ADDRESS,
    MARKER,
    Entry,
    EntryMeta,
    ManagedEntry,
    OpaqueEntry,
    is_expired,
    parse_line,
    render_line,
)
from eha.models.request import (
    DEFAULT_TTL_MINUTES,
    MAX_TTL_MINUTES,
    MIN_TTL_MINUTES,
    AddRequest,
    PruneRequest,
    RemoveRequest,
    Request,
    RequestType,
)

__all__ = [
    "DEFAULT_TTL_MINUTES",
    "LOOPBACK_ADDRESS",
    "MARKER",
    "MAX_TTL_MINUTES",
    "MIN_TTL_MINUTES",
    "AddRequest",
    "Entry",
    "EntryMeta",
    "ManagedEntry",
    "OpaqueEntry",
    "PruneRequest",
    "RemoveRequest",
    "Request",
    "RequestType",
    "is_expired",
    "parse_line",
    "render_line",
]
