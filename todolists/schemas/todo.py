from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class TodoBase(BaseModel):
    title: str


class TodoCreate(BaseModel):
    title: Title


class TodoOut(TodoBase):
    id: int
    done: bool
    todolist_id: int
    username: str
    model_config = ConfigDict(from_attributes=True)


class TodoCreated(BaseModel):
    """Body of a successful create; the insert does not report the new id."""

    title: str
    todolist_id: int
