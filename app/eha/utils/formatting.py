"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from eha.models.entry import ManagedEntry

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "border": "#29526d",
        "bold_header": "bold #69B9A1",
        "success": "#03b971",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "added": "#c1ff62",
        "removed": "#f53263",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> None:
    """Route eha's log records to stderr through Rich.

    Args:
        verbose: Log DEBUG and above instead of WARNING and above.
    """
    logger = logging.getLogger("eha")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False, show_time=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def format_remaining(expiry: datetime, now: datetime) -> str:
    """Format the time left until ``expiry`` as a compact string.

    Args:
        expiry: Entry expiry instant.
        now: Current instant.

    Returns:
        e.g. "2d 3h", "45m", or "expired".
    """
    remaining = expiry - now
    if remaining <= timedelta(0):
        return "expired"

    minutes = int(remaining.total_seconds() // 60)
    days, minutes = divmod(minutes, 1440)
    hours, minutes = divmod(minutes, 60)
    if days:
        return f"{days}d {hours}h"
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def create_entries_table(title: str = "Managed Entries") -> Table:
    """Create a pre-configured table for displaying managed entries.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Name", no_wrap=True)
    table.add_column("Expiry", style="muted")
    table.add_column("Remaining", style="info", justify="right")
    table.add_column("Comment", style="text", overflow="ellipsis")
    return table


def format_entry_row(entry: ManagedEntry, now: datetime) -> tuple[str, str, str, str]:
    """Format a managed entry as a table row.

    Expired entries are shown in the removed color.

    Args:
        entry: Entry to format.
        now: Current instant.

    Returns:
        Tuple of (name, expiry, remaining, comment) with Rich markup.
    """
    style = "removed" if entry.is_expired(now) else "added"
    return (
        f"[{style}]{escape(entry.name)}[/]",
        entry.expiry.isoformat(),
        format_remaining(entry.expiry, now),
        escape(entry.meta.comment or "-"),
    )


def format_cause_chain(error: BaseException) -> list[str]:
    """Collect an exception's message and those of its causes.

    Args:
        error: Outermost exception.

    Returns:
        Messages from outermost to innermost, skipping empty ones.
    """
    messages: list[str] = []
    current: BaseException | None = error
    while current is not None:
        text = str(current)
        if text:
            messages.append(text)
        current = current.__cause__
    return messages


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_error_chain(error: BaseException) -> None:
    """Print an error and, indented below it, each underlying cause."""
    messages = format_cause_chain(error) or [type(error).__name__]
    print_error(escape(messages[0]))
    for cause in messages[1:]:
        err_console.print(f"  [muted]caused by:[/] {escape(cause)}", highlight=False)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
