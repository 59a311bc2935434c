import dataclasses

import pytest

from todo.domain import IndexedItem, Item, TodoState, index_items


def test_item_dict_uses_stored_field_names():
    item = Item(text="Task", created_at=42)
    assert item.to_dict() == {"text": "Task", "createdAt": 42}
    assert Item.from_dict({"text": "Task", "createdAt": 42}) == item


def test_item_is_immutable():
    item = Item(text="Task", created_at=42)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.text = "Other"


def test_state_from_partial_dict():
    state = TodoState.from_dict({"todo": [{"text": "a", "createdAt": 1}]})
    assert state.todo == [Item("a", 1)]
    assert state.done == []
    assert state.to_dict() == {"todo": [{"text": "a", "createdAt": 1}], "done": []}


def test_state_keeps_extra_keys():
    state = TodoState.from_dict({"todo": [], "done": [], "version": 2})
    assert state.to_dict()["version"] == 2


def test_copy_is_independent():
    state = TodoState(todo=[Item("a", 1)])
    clone = state.copy()
    clone.todo.append(Item("b", 2))
    clone.get_list("done").append(Item("c", 3))
    assert state.todo == [Item("a", 1)]
    assert state.done == []


def test_index_items():
    entries = index_items([Item("a", 1), Item("b", 2)])
    assert entries == [IndexedItem(0, Item("a", 1)), IndexedItem(1, Item("b", 2))]
    assert entries[1].text == "b"
    assert entries[1].created_at == 2
