from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from todolists.config import DATABASE_URL


def make_engine(url: str) -> AsyncEngine:
    engine = create_async_engine(url, future=True, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        # SQLite leaves foreign keys off per connection; list deletes rely on the cascade.
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return engine


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=engine, expire_on_commit=False)


engine = make_engine(DATABASE_URL)
AsyncSessionLocal = make_sessionmaker(engine)

Base = declarative_base()


async def init_models(bind: AsyncEngine) -> None:
    # model modules register their tables on Base.metadata at import time
    from todolists.models import todo, todo_list, user  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def get_sessionmaker() -> async_sessionmaker:
    return AsyncSessionLocal
