"""Apply a single request to a parsed hosts file.

reconcile() is a pure function of (store, now, request). It never touches
the filesystem or reads the clock; callers pass ``now`` explicitly.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from eha.core.store import EntryStore
from eha.models.entry import Entry, ManagedEntry, is_expired
from eha.models.request import AddRequest, RemoveRequest, Request


@dataclass(frozen=True, slots=True)
class ReconcileSummary:
    """Counts of managed entries affected by a reconcile run.

    Attributes:
        expired: Entries dropped by the expiry sweep.
        removed: Live entries dropped by name (remove, or add with replace).
        added: Entries appended.
    """

    expired: int = 0
    removed: int = 0
    added: int = 0

    @property
    def changed(self) -> bool:
        """Check whether any managed entry was dropped or appended."""
        return bool(self.expired or self.removed or self.added)


def provenance_comment(origin: str, now: datetime) -> str:
    """Comment recorded on added entries for human auditing."""
    return f"set from {origin} at {now.isoformat()}"


def _drops_by_name(request: Request) -> str | None:
    """Name whose live entries the request removes, if any."""
    if isinstance(request, RemoveRequest):
        return request.name
    if isinstance(request, AddRequest) and request.replace:
        return request.name
    return None


def reconcile(store: EntryStore, now: datetime, request: Request) -> EntryStore:
    """Compute the new hosts contents for a request.

    1. Every managed entry whose expiry is not strictly after ``now`` is dropped.
    2. Remove requests drop every managed entry with exactly the given name.
    3. Add requests append one new managed entry at the end. Live entries with
       the same name are kept unless the request asks to replace them.

    Opaque entries are never dropped and keep their relative order.

    Args:
        store: Current hosts file contents.
        now: Current instant (timezone-aware).
        request: The operation to apply.

    Returns:
        New EntryStore; the input store is not modified.
    """
    drop_name = _drops_by_name(request)

    kept: list[Entry] = []
    for entry in store:
        if is_expired(entry, now):
            continue
        if drop_name is not None and isinstance(entry, ManagedEntry) and entry.name == drop_name:
            continue
        kept.append(entry)

    if isinstance(request, AddRequest):
        kept.append(
            ManagedEntry.create(
                name=request.name,
                expiry=now + timedelta(minutes=request.ttl_minutes),
                comment=provenance_comment(request.origin, now),
            )
        )

    return store.with_entries(kept)


def summarize(before: EntryStore, after: EntryStore, now: datetime) -> ReconcileSummary:
    """Describe what a reconcile run changed.

    Args:
        before: Store passed to reconcile().
        after: Store returned by reconcile().
        now: Instant used for the run.

    Returns:
        ReconcileSummary with expired, removed and added counts.
    """
    before_managed = before.managed()
    expired = sum(1 for entry in before_managed if entry.is_expired(now))
    live_before = len(before_managed) - expired

    after_managed = after.managed()
    # reconcile() carries surviving entries over as the same objects
    before_ids = {id(entry) for entry in before_managed}
    survivors = [entry for entry in after_managed if id(entry) in before_ids]
    added = len(after_managed) - len(survivors)
    removed = live_before - len(survivors)

    return ReconcileSummary(expired=expired, removed=removed, added=added)
