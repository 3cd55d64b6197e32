from pydantic import BaseModel, ConfigDict

from todolists.schemas.todo import Title, TodoOut


class TodoListBase(BaseModel):
    title: str


class TodoListCreate(BaseModel):
    title: Title


class TodoListUpdate(BaseModel):
    title: Title


class TodoListOut(TodoListBase):
    id: int
    username: str
    todos: list[TodoOut] = []
    model_config = ConfigDict(from_attributes=True)


class TodoListSummary(TodoListBase):
    """One row of the lists overview."""

    id: int
    count_all: int
    count_done: int
    is_done: bool


class TodoListDetail(TodoListOut):
    is_done: bool
    has_undone: bool
