from types import SimpleNamespace

from todolists.sorting import (
    has_incomplete,
    is_complete,
    partition_sorted,
    sort_by_title,
    sort_todo_lists,
    sort_todos,
)


def todo(title, done=False):
    return SimpleNamespace(title=title, done=done)


def todo_list(title, *todos):
    return SimpleNamespace(title=title, todos=list(todos))


def titles(items):
    return [item.title for item in items]


def test_sort_by_title_ignores_case():
    items = [todo("banana"), todo("Apple"), todo("cherry"), todo("apricot")]
    assert titles(sort_by_title(items)) == ["Apple", "apricot", "banana", "cherry"]


def test_sort_by_title_keeps_input_order_for_equal_titles():
    first, second = todo("milk"), todo("Milk")
    assert sort_by_title([first, second]) == [first, second]
    assert sort_by_title([second, first]) == [second, first]


def test_partition_sorted_puts_done_items_last():
    items = [todo("b", True), todo("a"), todo("c"), todo("A", True)]
    ordered = partition_sorted(items, lambda t: t.done)
    assert titles(ordered) == ["a", "c", "A", "b"]


def test_sort_todos_orders_undone_then_done():
    todos = [todo("Bread", True), todo("milk"), todo("apples", True), todo("Eggs")]
    ordered = sort_todos(todos)
    assert titles(ordered) == ["Eggs", "milk", "apples", "Bread"]
    flags = [t.done for t in ordered]
    assert flags == sorted(flags)


def test_empty_list_is_never_complete():
    empty = todo_list("Empty")
    assert not is_complete(empty)
    assert not has_incomplete(empty)


def test_is_complete_requires_every_todo_done():
    assert is_complete(todo_list("Done", todo("a", True), todo("b", True)))
    assert not is_complete(todo_list("Half", todo("a", True), todo("b")))
    assert has_incomplete(todo_list("Half", todo("a", True), todo("b")))


def test_sort_todo_lists_moves_complete_lists_after_open_ones():
    lists = [
        todo_list("archive", todo("x", True)),
        todo_list("Work", todo("report")),
        todo_list("empty"),
        todo_list("Bills", todo("rent", True), todo("power", True)),
    ]
    assert titles(sort_todo_lists(lists)) == ["empty", "Work", "archive", "Bills"]
