"""
Unit tests for the Database handle lifecycle.
"""

import asyncio

import pytest
from sqlalchemy.pool import StaticPool

from usersvc.data.database import Base, Database
from usersvc.data.errors import DatabaseNotConnectedError, UnsupportedDatabaseError
from usersvc.data.models import UserModel
from usersvc.domain.schemas import DatabaseConfig
from usersvc.repos.user_repo import UserRepo


class TestConnect:
    @pytest.mark.asyncio
    async def test_memory_database_uses_static_pool(self, database):
        """SQLite :memory: keeps a single shared connection."""
        assert database.connected
        assert isinstance(database.engine.pool, StaticPool)

    @pytest.mark.asyncio
    async def test_unsupported_type(self):
        with pytest.raises(UnsupportedDatabaseError):
            await Database.connect(DatabaseConfig(type="oracle"))

    def test_tables_default_to_registered_models(self):
        db = Database(DatabaseConfig())

        assert UserModel.__table__ in db.tables
        assert db.tables == list(Base.metadata.sorted_tables)

    @pytest.mark.asyncio
    async def test_tables_from_entities(self, database):
        assert database.tables == [UserModel.__table__]


class TestNotConnected:
    @pytest.mark.asyncio
    async def test_session_before_connect(self):
        db = Database(DatabaseConfig())

        with pytest.raises(DatabaseNotConnectedError):
            async with db.session():
                pass

    @pytest.mark.asyncio
    async def test_synchronize_before_connect(self):
        db = Database(DatabaseConfig())

        with pytest.raises(DatabaseNotConnectedError):
            await db.synchronize()

    @pytest.mark.asyncio
    async def test_session_after_close(self):
        db = await Database.connect(DatabaseConfig(entities=[UserModel]))
        await db.close()

        assert not db.connected
        with pytest.raises(DatabaseNotConnectedError):
            async with db.session():
                pass

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        db = await Database.connect(DatabaseConfig(entities=[UserModel]))

        await db.close()
        await db.close()

        assert db.engine is None


class TestSynchronize:
    @pytest.mark.asyncio
    async def test_operations_share_memory_database(self, database):
        repo = UserRepo(database)
        await repo.save(UserModel(name="Kept", email="kept@example.com"))

        assert await UserRepo(database).find_by_name("Kept") is not None

    @pytest.mark.asyncio
    async def test_drop_resets_data(self, database):
        repo = UserRepo(database)
        await repo.save(UserModel(name="Gone", email="gone@example.com"))

        await database.synchronize(drop=True)

        assert await repo.find_by_name("Gone") is None

    @pytest.mark.asyncio
    async def test_without_drop_keeps_data(self, database):
        repo = UserRepo(database)
        await repo.save(UserModel(name="Stays", email="stays@example.com"))

        await database.synchronize()

        assert await repo.find_by_name("Stays") is not None

    @pytest.mark.asyncio
    async def test_save_after_reset_assigns_id(self, database):
        repo = UserRepo(database)
        await repo.save(UserModel(name="A", email="a@example.com"))

        await database.synchronize(drop=True)
        again = await repo.save(UserModel(name="B", email="b@example.com"))

        assert again.id is not None


class TestSession:
    @pytest.mark.asyncio
    async def test_memory_sessions_take_turns(self, database):
        """Sessions on the shared in-memory connection never overlap."""
        active = []
        overlaps = []

        async def use_session(i):
            async with database.session():
                if active:
                    overlaps.append(i)
                active.append(i)
                await asyncio.sleep(0)
                active.remove(i)

        await asyncio.gather(*(use_session(i) for i in range(5)))

        assert overlaps == []
