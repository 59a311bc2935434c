"""Exceptions raised by the todo store."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for every error raised by :mod:`todo`."""


class ValidationError(TodoError, ValueError):
    """Raised when a caller passes semantically invalid input."""


class ItemIndexError(TodoError, IndexError):
    """Raised when an index does not address an item of the target list."""

    def __init__(self, index: int, list_name: str, length: int) -> None:
        self.index = index
        self.list_name = list_name
        self.length = length
        if length:
            hint = f"valid range is 0-{length - 1}"
        else:
            hint = f"the {list_name} list is empty"
        super().__init__(f"No item at index {index} in {list_name} ({hint})")


class StorageError(TodoError):
    """Raised when the backing file cannot be read, parsed or written."""


__all__ = ["TodoError", "ValidationError", "ItemIndexError", "StorageError"]
