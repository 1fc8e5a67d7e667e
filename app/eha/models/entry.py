"""Hosts file entry models.

Each line of a hosts file is represented as exactly one Entry:

- ManagedEntry: a line written by eha, identified by the ``# eha `` marker
  and carrying an expiry and an optional provenance comment.
- OpaqueEntry: any other line, kept verbatim.

Managed lines have the form::

    127.0.0.1<TAB><name><TAB># eha {"expiry":"2030-01-01T00:00:00Z","comment":"..."}
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Marker separating the address/name part of a line from the stored metadata
MARKER = "# eha "

# Address every managed name is mapped to
LOOPBACK_ADDRESS = "127.0.0.1"

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Stored expiries are RFC 3339 date-times; bare Unix timestamps are not accepted
_RFC3339_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}[Tt ]")


class EntryMeta(BaseModel):
    """Metadata stored after the marker of a managed line.

    Attributes:
        expiry: Instant after which the entry is eligible for removal.
        comment: Optional free-form provenance note.
    """

    model_config = ConfigDict(frozen=True)

    expiry: AwareDatetime
    comment: str | None = None

    @field_validator("expiry", mode="before")
    @classmethod
    def _require_rfc3339(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not _RFC3339_PREFIX.match(value):
            msg = "expiry must be an RFC 3339 date-time string"
            raise ValueError(msg)
        return value

    @classmethod
    def default(cls) -> EntryMeta:
        """Metadata used when a stored payload cannot be decoded.

        The expiry is the Unix epoch, so the entry is swept on the next run.
        """
        return cls(expiry=EPOCH, comment=None)

    @classmethod
    def decode(cls, payload: str) -> EntryMeta:
        """Decode a JSON payload, falling back to the default metadata.

        Args:
            payload: Text following the marker on a managed line.

        Returns:
            Decoded metadata, or EntryMeta.default() if the payload is not a
            JSON object with a valid timezone-aware expiry.
        """
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            logger.debug("Undecodable eha metadata %r: %s", payload[:100], e.errors()[0]["msg"])
            return cls.default()

    def encode(self) -> str:
        """Encode as compact JSON (no trailing newline)."""
        return self.model_dump_json()


@dataclass(frozen=True, slots=True)
class ManagedEntry:
    """A hosts line owned by eha.

    Attributes:
        name: DNS name mapped to the loopback address.
        meta: Stored expiry and comment.
    """

    name: str
    meta: EntryMeta

    @classmethod
    def create(cls, name: str, expiry: datetime, comment: str | None = None) -> ManagedEntry:
        """Build a managed entry from its parts."""
        return cls(name=name, meta=EntryMeta(expiry=expiry, comment=comment))

    @property
    def expiry(self) -> datetime:
        """Shortcut for the metadata expiry."""
        return self.meta.expiry

    def is_expired(self, now: datetime) -> bool:
        """Check whether the entry's expiry is not strictly after ``now``."""
        return self.meta.expiry <= now


@dataclass(frozen=True, slots=True)
class OpaqueEntry:
    """A hosts line not managed by eha, preserved byte-for-byte.

    Attributes:
        raw: Original line text without its line terminator.
    """

    raw: str


Entry = ManagedEntry | OpaqueEntry


def parse_line(line: str) -> Entry:
    """Classify and parse a single hosts line.

    The line is managed if it contains the marker and at least one
    whitespace-separated token precedes it; the last such token is the name.
    A marker with nothing usable before it leaves the line opaque.

    Args:
        line: Line text without its terminator.

    Returns:
        ManagedEntry or OpaqueEntry. Never raises on malformed metadata.
    """
    prefix, sep, payload = line.partition(MARKER)
    if not sep:
        return OpaqueEntry(raw=line)

    tokens = prefix.split()
    if not tokens:
        return OpaqueEntry(raw=line)

    return ManagedEntry(name=tokens[-1], meta=EntryMeta.decode(payload))


def render_line(entry: Entry) -> str:
    """Serialize an entry back to a single line of text.

    Opaque entries return their raw text unchanged. Managed entries are
    always rendered in the canonical tab-separated form.

    Args:
        entry: Entry to serialize.

    Returns:
        Line text without a terminator.
    """
    if isinstance(entry, OpaqueEntry):
        return entry.raw
    return f"{LOOPBACK_ADDRESS}\t{entry.name}\t{MARKER}{entry.meta.encode()}"


def is_expired(entry: Entry, now: datetime) -> bool:
    """Check whether an entry is subject to the expiry sweep.

    Opaque entries never expire.
    """
    if isinstance(entry, OpaqueEntry):
        return False
    return entry.is_expired(now)
