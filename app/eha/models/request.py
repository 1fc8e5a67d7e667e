"""Request models for hosts file operations.

Exactly one request is applied per invocation. Every request also sweeps
expired managed entries.
"""

from dataclasses import dataclass
from enum import Enum

DEFAULT_TTL_MINUTES = 1440
MIN_TTL_MINUTES = 1
MAX_TTL_MINUTES = 525600


class RequestType(str, Enum):
    """Type of operation requested.

    Attributes:
        ADD: Append a managed name with a time-to-live.
        REMOVE: Drop every managed entry with a given name.
        PRUNE: Only sweep expired entries.
    """

    ADD = "add"
    REMOVE = "remove"
    PRUNE = "prune"


@dataclass(frozen=True, slots=True)
class AddRequest:
    """Add a managed name.

    Attributes:
        name: DNS name to map to the loopback address.
        ttl_minutes: Minutes until the entry expires.
        origin: Working directory the request came from, recorded in the comment.
        replace: Drop live entries with the same name before appending.
    """

    name: str
    ttl_minutes: int = DEFAULT_TTL_MINUTES
    origin: str = ""
    replace: bool = False

    @property
    def request_type(self) -> RequestType:
        return RequestType.ADD


@dataclass(frozen=True, slots=True)
class RemoveRequest:
    """Remove every managed entry with exactly this name."""

    name: str

    @property
    def request_type(self) -> RequestType:
        return RequestType.REMOVE


@dataclass(frozen=True, slots=True)
class PruneRequest:
    """Remove expired managed entries only."""

    @property
    def request_type(self) -> RequestType:
        return RequestType.PRUNE


Request = AddRequest | RemoveRequest | PruneRequest
