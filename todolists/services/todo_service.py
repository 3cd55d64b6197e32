from sqlalchemy.ext.asyncio import async_sessionmaker

from todolists.repositories.todo_repo import TodoRepository
from todolists.results import Outcome
from todolists.schemas.todo import TodoOut


class TodoService:
    def __init__(self, sessionmaker: async_sessionmaker, username: str):
        self.repo = TodoRepository(sessionmaker, username)

    async def create_todo(self, list_id: int, title: str) -> Outcome:
        return await self.repo.create(list_id, title)

    async def toggle_todo(self, list_id: int, todo_id: int) -> TodoOut | None:
        """Flip the todo and return its new state, or None if there is no such todo."""
        if not await self.repo.toggle_done(list_id, todo_id):
            return None
        return await self.repo.load(list_id, todo_id)

    async def delete_todo(self, list_id: int, todo_id: int) -> Outcome:
        return await self.repo.delete(list_id, todo_id)

    async def complete_all(self, list_id: int) -> Outcome:
        return await self.repo.complete_all(list_id)
