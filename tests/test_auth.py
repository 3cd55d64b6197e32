import bcrypt
import pytest

from todolists.models.user import User
from todolists.services.auth_service import AuthService, hash_password

pytestmark = pytest.mark.anyio


@pytest.fixture
def auth(sessionmaker, users):
    return AuthService(sessionmaker)


async def test_authenticate_accepts_correct_password(auth, users):
    assert await auth.authenticate("alice", users["alice"]) is True


async def test_authenticate_rejects_wrong_password(auth, users):
    assert await auth.authenticate("alice", users["bob"]) is False


async def test_authenticate_unknown_user_is_false(auth):
    assert await auth.authenticate("nobody", "whatever") is False


async def test_authenticate_unreadable_hash_is_false(sessionmaker, auth):
    async with sessionmaker.begin() as session:
        session.add(User(username="carol", password="not-a-bcrypt-hash"))
    assert await auth.authenticate("carol", "not-a-bcrypt-hash") is False


def test_hash_password_is_salted():
    first = hash_password("secret", rounds=4)
    second = hash_password("secret", rounds=4)
    assert first != second
    assert first.startswith("$2")


async def test_authenticate_long_password_matches_its_first_72_bytes(sessionmaker, auth):
    password = "p" * 80
    stored = bcrypt.hashpw(password.encode("utf-8")[:72], bcrypt.gensalt(rounds=4)).decode("utf-8")
    async with sessionmaker.begin() as session:
        session.add(User(username="dave", password=stored))

    assert await auth.authenticate("dave", password) is True
    assert await auth.authenticate("dave", "p" * 71) is False


def test_hash_password_accepts_long_passwords():
    hashed = hash_password("p" * 80, rounds=4)
    assert bcrypt.checkpw(("p" * 72).encode("utf-8"), hashed.encode("utf-8"))
