import asyncio
import logging
import re
from collections import defaultdict
from typing import Any

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker

from todolists.models.todo import Todo
from todolists.models.todo_list import TodoList
from todolists.results import Outcome
from todolists.schemas.todo import TodoOut
from todolists.schemas.todo_list import TodoListOut
from todolists.sorting import sort_todo_lists, sort_todos

logger = logging.getLogger(__name__)

# PostgreSQL, MySQL and SQLite wordings of a unique-key violation
_UNIQUE_VIOLATION = re.compile(
    r"duplicate key value violates unique constraint"
    r"|Duplicate entry"
    r"|UNIQUE constraint failed"
)


class TodoListRepository:
    """
    Todo lists owned by one user.

    Every statement is scoped with `username = :username`, so a list id that
    belongs to someone else behaves exactly like a missing one. Each call
    runs in its own short-lived session; nothing spans two statements.
    """

    def __init__(self, sessionmaker: async_sessionmaker, username: str) -> None:
        self.sessionmaker = sessionmaker
        self.username = username

    # ------------------------ Read ------------------------

    async def _fetch_lists(self, *criteria: Any) -> list[TodoList]:
        stmt = select(TodoList).where(TodoList.username == self.username, *criteria)
        async with self.sessionmaker() as session:
            res = await session.execute(stmt)
            return list(res.scalars().all())

    async def _fetch_todos(self, *criteria: Any) -> list[Todo]:
        stmt = select(Todo).where(Todo.username == self.username, *criteria)
        async with self.sessionmaker() as session:
            res = await session.execute(stmt)
            return list(res.scalars().all())

    @staticmethod
    def _attach(todo_list: TodoList, todos: list[Todo]) -> TodoListOut:
        return TodoListOut(
            id=todo_list.id,
            title=todo_list.title,
            username=todo_list.username,
            todos=sort_todos([TodoOut.model_validate(todo) for todo in todos]),
        )

    async def list_all(self) -> list[TodoListOut]:
        """All of the user's lists with their todos, open lists first."""
        # Two independent reads, not a snapshot: a write landing between them
        # can show a list without a just-added todo, or the reverse.
        todo_lists, todos = await asyncio.gather(self._fetch_lists(), self._fetch_todos())

        by_list: dict[int, list[Todo]] = defaultdict(list)
        for todo in todos:
            by_list[todo.todolist_id].append(todo)

        return sort_todo_lists([self._attach(tl, by_list[tl.id]) for tl in todo_lists])

    async def load(self, list_id: int) -> TodoListOut | None:
        todo_lists, todos = await asyncio.gather(
            self._fetch_lists(TodoList.id == list_id),
            self._fetch_todos(Todo.todolist_id == list_id),
        )
        if not todo_lists:
            return None
        return self._attach(todo_lists[0], todos)

    async def find_by_title(self, title: str) -> TodoListOut | None:
        todo_lists = await self._fetch_lists(TodoList.title == title)
        if not todo_lists:
            return None
        todos = await self._fetch_todos(Todo.todolist_id == todo_lists[0].id)
        return self._attach(todo_lists[0], todos)

    async def exists_title(self, title: str) -> bool:
        """
        Whether the user already has a list called `title`.

        Only a courtesy check before inserting: a concurrent create can still
        win the race, and the unique constraint decides.
        """
        stmt = select(
            exists().where(TodoList.title == title, TodoList.username == self.username)
        )
        async with self.sessionmaker() as session:
            res = await session.execute(stmt)
            return bool(res.scalar())

    # ------------------------ Write ------------------------

    @staticmethod
    def is_unique_constraint_violation(error: BaseException) -> bool:
        orig = getattr(error, "orig", None) or error
        if "23505" in (getattr(orig, "sqlstate", None), getattr(orig, "pgcode", None)):
            return True
        args = getattr(orig, "args", ())
        if args and args[0] == 1062:
            return True
        return bool(_UNIQUE_VIOLATION.search(str(error)))

    async def create(self, title: str) -> Outcome:
        try:
            async with self.sessionmaker.begin() as session:
                session.add(TodoList(title=title, username=self.username))
        except IntegrityError as error:
            if not self.is_unique_constraint_violation(error):
                raise
            logger.info("duplicate list title %r for user %s", title, self.username)
            return Outcome.CONFLICT
        logger.debug("created list %r for user %s", title, self.username)
        return Outcome.SUCCESS

    async def rename(self, list_id: int, title: str) -> Outcome:
        stmt = (
            update(TodoList)
            .where(TodoList.id == list_id, TodoList.username == self.username)
            .values(title=title)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.sessionmaker.begin() as session:
                res = await session.execute(stmt)
        except IntegrityError as error:
            if not self.is_unique_constraint_violation(error):
                raise
            logger.info("duplicate list title %r for user %s", title, self.username)
            return Outcome.CONFLICT
        return Outcome.from_rowcount(res.rowcount)

    async def delete(self, list_id: int) -> Outcome:
        """Delete a list; its todos go with it through the foreign key cascade."""
        stmt = (
            delete(TodoList)
            .where(TodoList.id == list_id, TodoList.username == self.username)
            .execution_options(synchronize_session=False)
        )
        async with self.sessionmaker.begin() as session:
            res = await session.execute(stmt)
        return Outcome.from_rowcount(res.rowcount)
