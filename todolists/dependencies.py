from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import async_sessionmaker

from todolists.database import get_sessionmaker
from todolists.services.auth_service import AuthService
from todolists.services.todo_list_service import TodoListService
from todolists.services.todo_service import TodoService


def current_username(request: Request) -> str:
    username = request.session.get("username")
    if not request.session.get("signed_in") or not username:
        raise HTTPException(status_code=401, detail="Sign in required")
    return username


def get_auth_service(sessionmaker: async_sessionmaker = Depends(get_sessionmaker)) -> AuthService:
    return AuthService(sessionmaker)


def get_todo_list_service(
    username: str = Depends(current_username),
    sessionmaker: async_sessionmaker = Depends(get_sessionmaker),
) -> TodoListService:
    return TodoListService(sessionmaker, username)


def get_todo_service(
    username: str = Depends(current_username),
    sessionmaker: async_sessionmaker = Depends(get_sessionmaker),
) -> TodoService:
    return TodoService(sessionmaker, username)
