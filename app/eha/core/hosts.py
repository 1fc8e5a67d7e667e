"""Hosts file I/O operations.

This module reads a hosts file into an EntryStore and replaces its contents
atomically: the new text is written to a temporary file in the target's own
directory and then renamed over the target with os.replace(). The rename is
the only step that changes the target, so readers see either the old or the
new file, never a partial one.
"""

import logging
import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile

from eha.core.errors import EhaError
from eha.core.store import EntryStore

logger = logging.getLogger(__name__)


class HostsFileError(EhaError):
    """Base exception for hosts file I/O errors."""


class HostsReadError(HostsFileError):
    """Raised when the hosts file cannot be read or decoded."""


class HostsWriteError(HostsFileError):
    """Raised when the hosts file cannot be replaced."""


def read_hosts(path: Path) -> EntryStore:
    """Read and parse a hosts file.

    Args:
        path: Hosts file to read.

    Returns:
        Parsed EntryStore.

    Raises:
        HostsReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise HostsReadError(f"failed to read input file: {path}") from e

    store = EntryStore.from_text(text)
    logger.info("Read %d entries from existing file %s", len(store), path)
    return store


def _discard(tmp_path: Path) -> None:
    """Remove an abandoned temporary file, ignoring failures."""
    try:
        tmp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove temporary file %s: %s", tmp_path, e)


def write_atomic(path: Path, content: str | bytes) -> Path:
    """Replace ``path`` with ``content`` without a partially written window.

    The temporary file is created next to the target so the final rename
    stays on one filesystem. If the target exists its permission bits are
    copied onto the replacement. A failed rename is reported, never retried
    as a copy.

    Args:
        path: Target file.
        content: Full new contents; text is encoded as UTF-8.

    Returns:
        The target path.

    Raises:
        HostsWriteError: With a message naming the failing stage.
    """
    data = content.encode("utf-8") if isinstance(content, str) else content
    target = Path(path)

    try:
        tmp = NamedTemporaryFile(
            mode="wb",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        )
    except OSError as e:
        raise HostsWriteError("failed to create temp file") from e

    tmp_path = Path(tmp.name)
    logger.info("Writing to %s and moving to %s", tmp_path, target)

    try:
        with tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        if target.exists():
            shutil.copymode(target, tmp_path)
    except OSError as e:
        _discard(tmp_path)
        raise HostsWriteError("failed to write content") from e

    try:
        os.replace(tmp_path, target)
    except OSError as e:
        _discard(tmp_path)
        raise HostsWriteError("failed to rename temp file to input file") from e

    return target


def write_hosts(path: Path, store: EntryStore) -> Path:
    """Serialize a store and atomically replace the hosts file with it."""
    return write_atomic(path, store.render())
