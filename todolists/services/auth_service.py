import logging

import bcrypt
from sqlalchemy.ext.asyncio import async_sessionmaker

from todolists.config import BCRYPT_ROUNDS
from todolists.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes; existing hashes were made from that prefix
BCRYPT_MAX_BYTES = 72


def _pw_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(_pw_bytes(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


class AuthService:
    def __init__(self, sessionmaker: async_sessionmaker):
        self.repo = UserRepository(sessionmaker)

    async def authenticate(self, username: str, password: str) -> bool:
        """
        Check `password` against the stored bcrypt hash for `username`.

        An unknown user is a plain False, not an error. Database failures
        propagate.
        """
        stored = await self.repo.find_password_hash(username)
        if stored is None:
            logger.info("sign-in for unknown user %s", username)
            return False
        try:
            matched = bcrypt.checkpw(_pw_bytes(password), stored.encode("utf-8"))
        except ValueError:
            logger.warning("unreadable password hash stored for user %s", username)
            return False
        if not matched:
            logger.info("wrong password for user %s", username)
        return matched
