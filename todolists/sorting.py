"""
Display ordering for lists and todos.

Both collections are split into an "open" group followed by a "finished"
group, each ordered by lowercased title. `sorted` is stable, so equal titles
keep the order they were fetched in.
"""
from typing import Callable, Iterable, Protocol, Sequence, TypeVar


class Titled(Protocol):
    title: str


T = TypeVar("T", bound=Titled)


def title_key(item: Titled) -> str:
    return item.title.lower()


def sort_by_title(items: Iterable[T]) -> list[T]:
    return sorted(items, key=title_key)


def partition_sorted(items: Iterable[T], is_done: Callable[[T], bool]) -> list[T]:
    undone: list[T] = []
    done: list[T] = []
    for item in items:
        (done if is_done(item) else undone).append(item)
    return sort_by_title(undone) + sort_by_title(done)


def is_complete(todo_list) -> bool:
    """A list is complete when it has at least one todo and every todo is done."""
    return len(todo_list.todos) > 0 and all(todo.done for todo in todo_list.todos)


def has_incomplete(todo_list) -> bool:
    return any(not todo.done for todo in todo_list.todos)


def sort_todo_lists(todo_lists: Iterable[T]) -> list[T]:
    return partition_sorted(todo_lists, is_complete)


def sort_todos(todos: Sequence[T]) -> list[T]:
    return partition_sorted(todos, lambda todo: todo.done)
