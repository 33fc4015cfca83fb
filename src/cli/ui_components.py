"""UI components for the CLI (Rich).

Keeps string formatting and tables out of the command functions. Lines that
contain emoji shortcodes are returned raw; callers run them through the
`EmojiRenderer` before printing.
"""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import SetRequest, Status, TeamMemberStatus
from core.emoji.catalog import EmojiCatalog

LIMITED_NOTE = "(availability is limited)"


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def format_status_line(status: Status) -> str:
    """`<:emoji:> <message> [(availability is limited)]`."""

    return _join(status.emoji, status.message, LIMITED_NOTE if status.limited else "")


def format_member_line(member: TeamMemberStatus) -> str:
    return f"{member.login}: {format_status_line(member.status)}"


def format_set_confirmation(request: SetRequest) -> str:
    return _join("✓ Status set to", request.emoji_shortcode, request.message)


def build_emoji_choices(catalog: EmojiCatalog) -> Columns:
    """Numbered `glyph names description` grid for the emoji picker."""

    cells = []
    for index, emoji in enumerate(catalog, start=1):
        cell = Text(f"{index:>3}. {emoji.codepoint} {' '.join(emoji.names)}")
        if emoji.description:
            cell.append(f" {emoji.description}", style="dim")
        cells.append(cell)
    return Columns(cells, equal=True, column_first=True)


def build_doctor_table() -> Table:
    table = Table(title="gh-user-status doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def print_error(console: Console, error: Exception) -> None:
    console.print(f"X {error}", style="red", markup=False, emoji=False, soft_wrap=True)
