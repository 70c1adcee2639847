# usersvc/services/user_service.py
from usersvc.data.database import Database
from usersvc.data.models.user import UserModel
from usersvc.domain.schemas import UserRead
from usersvc.repos.user_repo import UserRepo
from usersvc.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Serwis obsługujący Use Case'y dla domeny User.
    Błędy z warstwy repozytorium przechodzą bez zmian.
    """

    def __init__(self, db: Database):
        self.repo = UserRepo(db)

    async def create_user(self, name: str, email: str) -> UserModel:
        """
        Use Case: Utworzenie użytkownika (Command).
        Brak unikalności name/email, każde wywołanie tworzy nowy rekord.
        """
        user = UserModel(name=name, email=email)
        created = await self.repo.save(user)

        logger.info(f"Utworzono użytkownika {created.id}")
        return created

    async def find_user_by_name(self, name: str) -> UserModel | None:
        return await self.repo.find_by_name(name)

    @staticmethod
    def to_read(user: UserModel) -> UserRead:
        return UserRead.model_validate(user)
