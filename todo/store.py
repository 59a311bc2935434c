"""The todo store: two ordered lists persisted to a JSON file.

A :class:`Store` is constructed once per invocation and handed to whatever
issues commands. Each mutating call validates its input, applies the change to
a copy of the lists, writes the whole document and only then adopts the new
state. Items are addressed by their current position; positions shift as soon
as an earlier item is removed, so they are not stable identifiers.

Concurrent invocations against the same file are not coordinated; the last
writer wins.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from . import persistence
from .config import resolve_db_path
from .domain import LIST_NAMES, IndexedItem, Item, TodoState, index_items
from .errors import ItemIndexError, ValidationError
from .schema import missing_lists

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class Store:
    def __init__(self, path: Path | str | None = None, clock: Callable[[], int] = now_ms) -> None:
        self.path = resolve_db_path(path)
        self._clock = clock
        self._state: Optional[TodoState] = None

    def initialize(self) -> None:
        """Make sure the backing file exists and holds both lists.

        Missing lists are created empty. Calling this on a complete file does
        not write anything.
        """
        if not self.path.exists():
            logger.info("Creating %s", self.path)
            state = TodoState()
            persistence.save(state.to_dict(), self.path)
            self._state = state
            return

        data = persistence.load(self.path)
        state = TodoState.from_dict(data)
        missing = missing_lists(data)
        if missing:
            logger.info("Adding missing list(s) %s to %s", ", ".join(missing), self.path)
            persistence.save(state.to_dict(), self.path)
        self._state = state

    @property
    def state(self) -> TodoState:
        if self._state is None:
            self.initialize()
        assert self._state is not None
        return self._state

    def list_todo(self) -> List[IndexedItem]:
        return index_items(self.state.todo)

    def list_done(self) -> List[IndexedItem]:
        return index_items(self.state.done)

    def add(self, text: str) -> Item:
        """Append a new item with the current time to the todo list."""
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Item text must be a non-empty string")
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError("Item text must be valid UTF-8") from None
        item = Item(text=text, created_at=self._clock())
        state = self.state.copy()
        state.todo.append(item)
        self._commit(state)
        logger.debug("Added %r", text)
        return item

    def remove(self, index: int) -> Item:
        """Delete the todo item at ``index``; later items shift down by one."""
        self._check_index(index)
        state = self.state.copy()
        item = state.todo.pop(index)
        self._commit(state)
        logger.debug("Removed %r from todo", item.text)
        return item

    def mark_done(self, index: int) -> Item:
        """Move the todo item at ``index`` to the end of the done list.

        The item keeps its original ``created_at``. Both lists are written in
        a single save.
        """
        self._check_index(index)
        state = self.state.copy()
        item = state.todo.pop(index)
        state.done.append(item)
        self._commit(state)
        logger.debug("Marked %r as done", item.text)
        return item

    def clear(self, list_name: str) -> None:
        if list_name not in LIST_NAMES:
            raise ValidationError(f"Unknown list {list_name!r}; expected one of: {', '.join(LIST_NAMES)}")
        state = self.state.copy()
        state.get_list(list_name).clear()
        self._commit(state)
        logger.debug("Cleared %s", list_name)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValidationError(f"Index must be an integer, got {index!r}")
        length = len(self.state.todo)
        if not 0 <= index < length:
            raise ItemIndexError(index, "todo", length)

    def _commit(self, state: TodoState) -> None:
        persistence.save(state.to_dict(), self.path)
        self._state = state


__all__ = ["Store", "now_ms"]
