# usersvc/repos/user_repo.py
from usersvc.data.client import EntityClient
from usersvc.data.database import Database
from usersvc.data.models.user import UserModel
from usersvc.utils.logging import get_logger

logger = get_logger(__name__)


class UserRepo:
    def __init__(self, db: Database):
        self.client = EntityClient(db, UserModel)

    async def save(self, user: UserModel) -> UserModel:
        return await self.client.save(user)

    async def find_by_name(self, name: str) -> UserModel | None:
        # przy kilku użytkownikach o tej samej nazwie zwraca dowolnego z nich
        user = await self.client.find_one(name=name)
        logger.debug(f"Wyszukiwanie użytkownika {name!r}: {user.id if user else None}")
        return user
