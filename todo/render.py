"""Text rendering for the todo CLI."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List

import typer

from .domain import IndexedItem

TIMESTAMP_FORMAT = "%y. %m. %d. %H:%M"

USAGE = """
Usage:

[Command]
'todo' - Alias for 'todo ls'.
'help' - Show help.
'add {item}' - Add an item.
'done {item-idx}' - Mark an item as done.
'rm {item-idx}' - Remove an item.
'ls' - List all items.
'clear {todo | done}' - Clear all items of the list.
"""


def format_timestamp(created_at: int) -> str:
    """Return ``created_at`` (epoch milliseconds) as a short local date and time."""
    return datetime.fromtimestamp(created_at / 1000).strftime(TIMESTAMP_FORMAT)


def render_list(title: str, entries: Iterable[IndexedItem]) -> str:
    lines: List[str] = [typer.style(f"{title}:", bold=True)]
    for entry in entries:
        lines.append(f"{entry.index}. {entry.text} [{format_timestamp(entry.created_at)}]")
    return "\n".join(lines)


def render_lists(todo: Iterable[IndexedItem], done: Iterable[IndexedItem]) -> str:
    """Render the todo list, a blank line, then the done list."""
    return render_list("Todo", todo) + "\n\n" + render_list("Done", done)


__all__ = ["USAGE", "format_timestamp", "render_list", "render_lists"]
