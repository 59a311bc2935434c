from __future__ import annotations

from typing import Any, Dict

from .domain import LIST_NAMES
from .errors import StorageError


class SchemaError(StorageError):
    """Raised when a stored document does not conform to the expected layout."""


def validate_item(item: Any, where: str) -> None:
    """Validate a stored item dict.

    Expected keys:
    - text: required string
    - createdAt: required integer, milliseconds since the epoch
    """
    if not isinstance(item, dict):
        raise SchemaError(f"{where} must be an object")

    if not isinstance(item.get("text"), str):
        raise SchemaError(f"{where} must have a 'text' string")

    created = item.get("createdAt")
    if isinstance(created, bool) or not isinstance(created, int):
        raise SchemaError(f"{where} must have an integer 'createdAt'")


def validate_document(data: Dict[str, Any]) -> None:
    """Validate the root document. Missing lists are allowed."""
    if not isinstance(data, dict):
        raise SchemaError("root must be an object")
    for name in LIST_NAMES:
        if name not in data:
            continue
        items = data[name]
        if not isinstance(items, list):
            raise SchemaError(f"'{name}' must be an array")
        for i, item in enumerate(items):
            validate_item(item, f"{name}[{i}]")


def missing_lists(data: Dict[str, Any]) -> list:
    """Return the names of the lists absent from ``data``."""
    return [name for name in LIST_NAMES if name not in data]


__all__ = ["SchemaError", "validate_item", "validate_document", "missing_lists"]
