from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from todolists.models.user import User


class UserRepository:
    def __init__(self, sessionmaker: async_sessionmaker) -> None:
        self.sessionmaker = sessionmaker

    async def find_password_hash(self, username: str) -> str | None:
        async with self.sessionmaker() as session:
            res = await session.execute(select(User.password).where(User.username == username))
            return res.scalar_one_or_none()

    async def create(self, username: str, password_hash: str) -> User:
        user = User(username=username, password=password_hash)
        async with self.sessionmaker.begin() as session:
            session.add(user)
        return user
