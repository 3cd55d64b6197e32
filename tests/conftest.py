import os

import pytest
from httpx import ASGITransport, AsyncClient

# keep the module-level engine off the production database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from todolists.database import get_sessionmaker, init_models, make_engine, make_sessionmaker
from todolists.main import app
from todolists.repositories.user_repo import UserRepository
from todolists.services.auth_service import hash_password

USERS = {
    "alice": "alice-secret",
    "bob": "bob-secret",
}


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def sessionmaker(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'todolists.db'}")
    await init_models(engine)
    yield make_sessionmaker(engine)
    await engine.dispose()


@pytest.fixture
async def users(sessionmaker):
    repo = UserRepository(sessionmaker)
    for username, password in USERS.items():
        await repo.create(username, hash_password(password, rounds=4))
    return USERS


@pytest.fixture
async def client(sessionmaker, users):
    app.dependency_overrides[get_sessionmaker] = lambda: sessionmaker
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def sign_in(client, username):
    res = await client.post("/users/signin", json={"username": username, "password": USERS[username]})
    assert res.status_code == 200
    return client


@pytest.fixture
async def alice(client):
    return await sign_in(client, "alice")
