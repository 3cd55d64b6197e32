import logging
import time

from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from todolists.config import LOG_LEVEL, SECRET_KEY, SESSION_COOKIE, SESSION_MAX_AGE
from todolists.routers import todo_list_router, todo_router, user_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Todo Lists")

app.add_middleware(
    SessionMiddleware,
    secret_key=SECRET_KEY,
    session_cookie=SESSION_COOKIE,
    max_age=SESSION_MAX_AGE,
    same_site="lax",
)

app.include_router(user_router.router, prefix="/users", tags=["Users"])
app.include_router(todo_list_router.router, prefix="/lists", tags=["Todo lists"])
app.include_router(todo_router.router, prefix="/lists", tags=["Todos"])


@app.middleware("http")
async def access_log(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000.0
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response


# Root health
@app.get("/")
async def read_root():
    return {"status": "ok"}
