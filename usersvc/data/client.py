# usersvc/data/client.py
from typing import Any, Generic, Type, TypeVar

from sqlalchemy import select

from usersvc.data.database import Database

T = TypeVar("T")


class EntityClient(Generic[T]):
    """
    Minimalny klient persystencji dla jednego modelu.
    Udostępnia tylko save i find_one, repozytoria trzymają go jako pole.
    Każde wywołanie to osobna sesja (osobna jednostka pracy).
    """

    def __init__(self, db: Database, model: Type[T]):
        self.db = db
        self.model = model

    async def save(self, entity: T) -> T:
        async with self.db.session() as session:
            session.add(entity)
            try:
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            await session.refresh(entity)
            return entity

    async def find_one(self, **filters: Any) -> T | None:
        async with self.db.session() as session:
            result = await session.execute(
                select(self.model).filter_by(**filters).limit(1)
            )
            return result.scalars().first()
