import logging

from sqlalchemy import delete, false, insert, literal, not_, select, update
from sqlalchemy.ext.asyncio import async_sessionmaker

from todolists.models.todo import Todo
from todolists.models.todo_list import TodoList
from todolists.results import Outcome
from todolists.schemas.todo import TodoOut
from todolists.sorting import sort_todos

logger = logging.getLogger(__name__)


class TodoRepository:
    """Todos of one user, addressed by (list id, todo id)."""

    def __init__(self, sessionmaker: async_sessionmaker, username: str) -> None:
        self.sessionmaker = sessionmaker
        self.username = username

    def _scope(self, list_id: int):
        return (Todo.todolist_id == list_id, Todo.username == self.username)

    async def _write(self, stmt) -> Outcome:
        async with self.sessionmaker.begin() as session:
            res = await session.execute(stmt.execution_options(synchronize_session=False))
        return Outcome.from_rowcount(res.rowcount)

    # ------------------------ Read ------------------------

    async def sorted_todos(self, list_id: int) -> list[TodoOut]:
        """Undone todos first, then done ones; each group by title."""
        stmt = select(Todo).where(*self._scope(list_id))
        async with self.sessionmaker() as session:
            res = await session.execute(stmt)
            todos = [TodoOut.model_validate(todo) for todo in res.scalars().all()]
        return sort_todos(todos)

    async def load(self, list_id: int, todo_id: int) -> TodoOut | None:
        stmt = select(Todo).where(*self._scope(list_id), Todo.id == todo_id)
        async with self.sessionmaker() as session:
            res = await session.execute(stmt)
            todo = res.scalar_one_or_none()
        return TodoOut.model_validate(todo) if todo is not None else None

    # ------------------------ Write ------------------------

    async def toggle_done(self, list_id: int, todo_id: int) -> Outcome:
        stmt = (
            update(Todo)
            .where(*self._scope(list_id), Todo.id == todo_id)
            .values(done=not_(Todo.done))
        )
        return await self._write(stmt)

    async def delete(self, list_id: int, todo_id: int) -> Outcome:
        stmt = delete(Todo).where(*self._scope(list_id), Todo.id == todo_id)
        return await self._write(stmt)

    async def complete_all(self, list_id: int) -> Outcome:
        """
        Mark every undone todo of the list done.

        NOT_FOUND means no row changed: either the list does not exist for
        this user or it had nothing left to complete. The two cases are not
        told apart.
        """
        stmt = update(Todo).where(*self._scope(list_id), Todo.done == false()).values(done=True)
        return await self._write(stmt)

    async def create(self, list_id: int, title: str) -> Outcome:
        # INSERT ... SELECT from the owning list row, so nothing is inserted
        # unless the list exists and belongs to this user.
        owner = select(literal(title), TodoList.id, TodoList.username).where(
            TodoList.id == list_id, TodoList.username == self.username
        )
        stmt = insert(Todo).from_select(["title", "todolist_id", "username"], owner)
        async with self.sessionmaker.begin() as session:
            conn = await session.connection()
            res = await conn.execute(stmt)
        outcome = Outcome.from_rowcount(res.rowcount)
        logger.debug("create todo %r in list %s for %s: %s", title, list_id, self.username, outcome.value)
        return outcome
