# usersvc/data/database.py
import asyncio
from contextlib import asynccontextmanager, nullcontext
from typing import AsyncIterator, List

from sqlalchemy import Table
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from usersvc.data.errors import DatabaseNotConnectedError
from usersvc.domain.schemas import DatabaseConfig
from usersvc.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


class Database:
    """
    Uchwyt połączenia z bazą danych.
    Tworzony raz przez właściciela (np. testy) i przekazywany jawnie dalej.
    Każda operacja otwiera własną sesję przez session().
    """

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None
        self._queue: asyncio.Lock | None = None

    @classmethod
    async def connect(cls, config: DatabaseConfig | None = None) -> "Database":
        db = cls(config or DatabaseConfig.from_settings())
        await db.open()
        return db

    @property
    def connected(self) -> bool:
        return self.engine is not None

    @property
    def tables(self) -> List[Table]:
        # brak jawnej listy modeli = wszystko co zarejestrowane w Base.metadata
        if self.config.entities:
            return [entity.__table__ for entity in self.config.entities]
        return list(Base.metadata.sorted_tables)

    async def open(self) -> None:
        options = {"echo": self.config.logging}
        if self.config.in_memory:
            # jedno współdzielone połączenie, inaczej każda sesja widzi pustą bazę
            options["poolclass"] = StaticPool
            options["connect_args"] = {"check_same_thread": False}
            # jedno połączenie = jedna transakcja naraz, sesje czekają w kolejce
            self._queue = asyncio.Lock()

        self.engine = create_async_engine(self.config.url, **options)
        self._sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)
        logger.info(f"Połączono z bazą {self.config.url}")

        if self.config.synchronize:
            await self.synchronize(drop=self.config.drop_schema)

    async def synchronize(self, drop: bool = False) -> None:
        """
        Tworzy tabele zarejestrowanych modeli.
        drop=True najpierw usuwa istniejące tabele (reset schematu).
        """
        engine = self._require_engine()
        tables = self.tables

        async with self._turn():
            async with engine.begin() as conn:
                if drop:
                    await conn.run_sync(Base.metadata.drop_all, tables=tables)
                await conn.run_sync(Base.metadata.create_all, tables=tables)

        logger.info(f"Schemat zsynchronizowany (drop={drop}): {[t.name for t in tables]}")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessionmaker is None:
            raise DatabaseNotConnectedError("Database is not connected")

        async with self._turn():
            session = self._sessionmaker()
            try:
                yield session
            finally:
                await session.close()

    async def close(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._sessionmaker = None
        self._queue = None
        logger.info("Połączenie z bazą zamknięte")

    def _turn(self):
        return self._queue if self._queue is not None else nullcontext()

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise DatabaseNotConnectedError("Database is not connected")
        return self.engine
