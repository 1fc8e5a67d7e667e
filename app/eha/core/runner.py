"""Request orchestration.

Ties validation, reading, reconciliation and writing together for a single
invocation. Nothing is written until the final atomic rename, so any failure
before it leaves the hosts file untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from eha.core.hosts import read_hosts, write_hosts
from eha.core.reconcile import ReconcileSummary, reconcile, summarize
from eha.core.validation import validate_request
from eha.models.request import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of a request.

    Attributes:
        content: Serialized hosts file contents after the request.
        summary: Counts of expired, removed and added entries.
        written: Whether the file was replaced (False for dry-run).
    """

    content: str
    summary: ReconcileSummary
    written: bool


def run_request(
    path: Path,
    request: Request,
    now: datetime,
    dry_run: bool = False,
) -> RunResult:
    """Validate, reconcile and (unless dry-run) write a request.

    Args:
        path: Hosts file to operate on.
        request: Operation to apply.
        now: Current instant (timezone-aware).
        dry_run: Return the new contents without touching the file.

    Returns:
        RunResult with the new contents.

    Raises:
        ValidationError: If the request is invalid (before any file I/O).
        HostsReadError: If the hosts file cannot be read.
        HostsWriteError: If the hosts file cannot be replaced.
    """
    validate_request(request)

    before = read_hosts(path)
    after = reconcile(before, now, request)
    summary = summarize(before, after, now)
    content = after.render()

    logger.debug(
        "%s: %d expired, %d removed, %d added",
        request.request_type.value,
        summary.expired,
        summary.removed,
        summary.added,
    )

    if dry_run:
        return RunResult(content=content, summary=summary, written=False)

    write_hosts(path, after)
    return RunResult(content=content, summary=summary, written=True)
