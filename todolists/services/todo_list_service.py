from sqlalchemy.ext.asyncio import async_sessionmaker

from todolists.repositories.todo_list_repo import TodoListRepository
from todolists.results import Outcome
from todolists.schemas.todo_list import TodoListDetail, TodoListOut, TodoListSummary
from todolists.sorting import has_incomplete, is_complete


class TodoListService:
    def __init__(self, sessionmaker: async_sessionmaker, username: str):
        self.repo = TodoListRepository(sessionmaker, username)

    async def overview(self) -> list[TodoListSummary]:
        todo_lists = await self.repo.list_all()
        return [
            TodoListSummary(
                id=tl.id,
                title=tl.title,
                count_all=len(tl.todos),
                count_done=sum(1 for todo in tl.todos if todo.done),
                is_done=is_complete(tl),
            )
            for tl in todo_lists
        ]

    async def detail(self, list_id: int) -> TodoListDetail | None:
        todo_list = await self.repo.load(list_id)
        if todo_list is None:
            return None
        return TodoListDetail(
            **todo_list.model_dump(),
            is_done=is_complete(todo_list),
            has_undone=has_incomplete(todo_list),
        )

    async def create_list(self, title: str) -> Outcome:
        # The pre-check only saves a round trip; the insert still reports a
        # duplicate that slipped in between the two statements.
        if await self.repo.exists_title(title):
            return Outcome.CONFLICT
        return await self.repo.create(title)

    async def rename_list(self, list_id: int, title: str) -> Outcome:
        todo_list = await self.repo.load(list_id)
        if todo_list is None:
            return Outcome.NOT_FOUND
        if todo_list.title == title:
            return Outcome.SUCCESS
        if await self.repo.exists_title(title):
            return Outcome.CONFLICT
        return await self.repo.rename(list_id, title)

    async def find_by_title(self, title: str) -> TodoListOut | None:
        return await self.repo.find_by_title(title)

    async def delete_list(self, list_id: int) -> Outcome:
        return await self.repo.delete(list_id)
