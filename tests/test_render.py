from datetime import datetime

from todo.domain import IndexedItem, Item
from todo.render import USAGE, format_timestamp, render_list, render_lists

STAMP = 1_700_000_000_000


def test_format_timestamp_uses_local_time():
    expected = datetime.fromtimestamp(STAMP / 1000).strftime("%y. %m. %d. %H:%M")
    assert format_timestamp(STAMP) == expected


def test_render_list_lines():
    entries = [IndexedItem(0, Item("a", STAMP)), IndexedItem(1, Item("b", STAMP))]
    header, first, second = render_list("Todo", entries).split("\n")
    assert "Todo:" in header
    assert header.startswith("\x1b[1m")
    assert first == f"0. a [{format_timestamp(STAMP)}]"
    assert second.startswith("1. b [")


def test_render_lists_separates_with_blank_line():
    text = render_lists([], [IndexedItem(0, Item("x", STAMP))])
    todo_part, done_part = text.split("\n\n")
    assert "Todo:" in todo_part
    assert "Done:" in done_part
    assert "0. x" in done_part


def test_usage_lists_commands():
    for command in ["'help'", "'add {item}'", "'done {item-idx}'", "'rm {item-idx}'", "'ls'", "'clear {todo | done}'"]:
        assert command in USAGE
