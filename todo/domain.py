from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, List

LIST_NAMES = ("todo", "done")


@dataclass(frozen=True)
class Item:
    """A single todo entry: its text and creation time in epoch milliseconds."""

    text: str
    created_at: int

    def to_dict(self) -> dict:
        return {'text': self.text, 'createdAt': self.created_at}

    @classmethod
    def from_dict(cls, data: dict) -> 'Item':
        return cls(text=data['text'], created_at=data['createdAt'])


@dataclass(frozen=True)
class IndexedItem:
    """An item paired with its current position in a list.

    The index is recomputed on every listing and is not a stable identifier.
    """

    index: int
    item: Item

    @property
    def text(self) -> str:
        return self.item.text

    @property
    def created_at(self) -> int:
        return self.item.created_at


@dataclass
class TodoState:
    """The two ordered lists kept in the backing file."""

    todo: List[Item] = field(default_factory=list)
    done: List[Item] = field(default_factory=list)
    extra: dict = field(default_factory=dict)

    def get_list(self, name: str) -> List[Item]:
        return self.todo if name == 'todo' else self.done

    def copy(self) -> 'TodoState':
        return replace(self, todo=list(self.todo), done=list(self.done), extra=dict(self.extra))

    def to_dict(self) -> dict:
        data: dict[str, Any] = dict(self.extra)
        data['todo'] = [i.to_dict() for i in self.todo]
        data['done'] = [i.to_dict() for i in self.done]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'TodoState':
        return cls(
            todo=[Item.from_dict(i) for i in data.get('todo', [])],
            done=[Item.from_dict(i) for i in data.get('done', [])],
            extra={k: v for k, v in data.items() if k not in LIST_NAMES},
        )


def index_items(items: List[Item]) -> List[IndexedItem]:
    return [IndexedItem(index=i, item=item) for i, item in enumerate(items)]
