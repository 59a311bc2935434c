"""Personal todo list manager core package."""

from .domain import Item, IndexedItem, TodoState
from .errors import TodoError, ValidationError, ItemIndexError, StorageError
from .store import Store

__all__ = [
    "Item",
    "IndexedItem",
    "TodoState",
    "TodoError",
    "ValidationError",
    "ItemIndexError",
    "StorageError",
    "Store",
]
