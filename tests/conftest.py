"""
Shared fixtures: in-memory SQLite database and service.
"""

import pytest_asyncio

from usersvc.data.database import Database
from usersvc.data.models import UserModel
from usersvc.domain.schemas import DatabaseConfig
from usersvc.services.user_service import UserService


@pytest_asyncio.fixture
async def database():
    """Connected in-memory database; schema is reset and connection closed after the test."""
    db = await Database.connect(
        DatabaseConfig(
            type="sqlite",
            database=":memory:",
            synchronize=True,
            drop_schema=True,
            logging=False,
            entities=[UserModel],
        )
    )

    yield db

    await db.synchronize(drop=True)
    await db.close()


@pytest_asyncio.fixture
async def user_service(database):
    return UserService(database)
