from fastapi import APIRouter, Depends, HTTPException

from todolists.dependencies import get_todo_list_service
from todolists.results import Outcome
from todolists.schemas.todo_list import (
    TodoListCreate,
    TodoListDetail,
    TodoListOut,
    TodoListSummary,
    TodoListUpdate,
)
from todolists.services.todo_list_service import TodoListService

router = APIRouter()


@router.get("", response_model=list[TodoListSummary])
async def list_todo_lists(service: TodoListService = Depends(get_todo_list_service)):
    return await service.overview()


@router.post("", response_model=TodoListOut, status_code=201)
async def create_todo_list(
    list_in: TodoListCreate, service: TodoListService = Depends(get_todo_list_service)
):
    outcome = await service.create_list(list_in.title)
    if outcome is Outcome.CONFLICT:
        raise HTTPException(status_code=409, detail="The list title must be unique.")
    todo_list = await service.find_by_title(list_in.title)
    if todo_list is None:
        # deleted again before we could read it back
        raise HTTPException(status_code=404, detail="Todo list not found")
    return todo_list


@router.get("/{list_id}", response_model=TodoListDetail)
async def get_todo_list(list_id: int, service: TodoListService = Depends(get_todo_list_service)):
    todo_list = await service.detail(list_id)
    if todo_list is None:
        raise HTTPException(status_code=404, detail="Todo list not found")
    return todo_list


@router.put("/{list_id}", response_model=TodoListDetail)
async def rename_todo_list(
    list_id: int,
    list_in: TodoListUpdate,
    service: TodoListService = Depends(get_todo_list_service),
):
    outcome = await service.rename_list(list_id, list_in.title)
    if outcome is Outcome.CONFLICT:
        raise HTTPException(status_code=409, detail="The list title must be unique.")
    todo_list = await service.detail(list_id) if outcome else None
    if todo_list is None:
        raise HTTPException(status_code=404, detail="Todo list not found")
    return todo_list


@router.delete("/{list_id}", status_code=204)
async def delete_todo_list(list_id: int, service: TodoListService = Depends(get_todo_list_service)):
    if not await service.delete_list(list_id):
        raise HTTPException(status_code=404, detail="Todo list not found")
