"""Ordered, in-memory view of a hosts file.

An EntryStore holds one Entry per line, in file order, and remembers whether
the source text ended with a newline and whether it used CRLF line endings,
so the file can be reproduced exactly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from eha.models.entry import Entry, ManagedEntry, parse_line, render_line

LINE_SEPARATOR = "\n"
CARRIAGE_RETURN = "\r"


def _uses_crlf(text: str) -> bool:
    """Whether the first line of ``text`` is terminated by ``\\r\\n``."""
    first_newline = text.find(LINE_SEPARATOR)
    return first_newline > 0 and text[first_newline - 1] == CARRIAGE_RETURN


@dataclass(frozen=True, slots=True)
class EntryStore:
    """Parsed hosts file contents.

    Attributes:
        entries: Entries in original line order. Duplicate names are allowed.
        trailing_newline: Whether the source text ended with a newline.
        crlf: Whether the source text used ``\\r\\n`` line endings. Managed
            lines are then rendered with a ``\\r`` before their terminator.
    """

    entries: tuple[Entry, ...] = ()
    trailing_newline: bool = False
    crlf: bool = False

    @classmethod
    def from_text(cls, text: str) -> EntryStore:
        """Parse hosts file text.

        Lines are split on ``\\n`` only, so opaque lines of a CRLF file keep
        their ``\\r``. A final newline terminates the last line rather than
        starting an empty one.

        Args:
            text: Full file contents.

        Returns:
            EntryStore with one entry per line.
        """
        if not text:
            return cls()

        crlf = _uses_crlf(text)
        trailing_newline = text.endswith(LINE_SEPARATOR)
        if trailing_newline:
            text = text[: -len(LINE_SEPARATOR)]

        return cls(
            entries=tuple(parse_line(line) for line in text.split(LINE_SEPARATOR)),
            trailing_newline=trailing_newline,
            crlf=crlf,
        )

    def with_entries(self, entries: Iterable[Entry]) -> EntryStore:
        """Return a new store with ``entries``, keeping the line ending conventions."""
        return EntryStore(entries=tuple(entries), trailing_newline=self.trailing_newline, crlf=self.crlf)

    def render(self) -> str:
        """Serialize back to text, joining lines with ``\\n``."""
        if not self.entries:
            # An emptied file keeps no terminator
            return ""
        lines = [render_line(entry) for entry in self.entries]
        if self.crlf:
            terminated = len(lines) if self.trailing_newline else len(lines) - 1
            for index in range(terminated):
                if isinstance(self.entries[index], ManagedEntry):
                    lines[index] += CARRIAGE_RETURN
        text = LINE_SEPARATOR.join(lines)
        if self.trailing_newline:
            text += LINE_SEPARATOR
        return text

    def managed(self) -> list[ManagedEntry]:
        """Managed entries in file order."""
        return [entry for entry in self.entries if isinstance(entry, ManagedEntry)]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
