# usersvc/domain/schemas.py
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from usersvc.data.errors import UnsupportedDatabaseError
from usersvc.utils import settings

# engine kind -> async SQLAlchemy dialect+driver
_DRIVERS = {
    "sqlite": "sqlite+aiosqlite",
}

MEMORY_DATABASE = ":memory:"


class DatabaseConfig(BaseModel):
    """Parametry połączenia z bazą danych."""

    type: str = Field("sqlite", description="Rodzaj silnika bazy danych")
    database: str = Field(MEMORY_DATABASE, description="Lokalizacja bazy danych")
    synchronize: bool = Field(True, description="Tworzenie schematu przy połączeniu")
    drop_schema: bool = Field(False, description="Usunięcie schematu przed synchronizacją")
    logging: bool = Field(False, description="Logowanie zapytań SQL")
    entities: List[Any] = Field(default_factory=list, description="Zarejestrowane modele")

    @classmethod
    def from_settings(cls) -> "DatabaseConfig":
        return cls(
            type=settings.DATABASE_TYPE,
            database=settings.DATABASE_NAME,
            synchronize=settings.DATABASE_SYNCHRONIZE,
            drop_schema=settings.DATABASE_DROP_SCHEMA,
            logging=settings.DATABASE_LOGGING,
        )

    @property
    def in_memory(self) -> bool:
        return self.database in ("", MEMORY_DATABASE)

    @property
    def url(self) -> str:
        driver = _DRIVERS.get(self.type)
        if driver is None:
            raise UnsupportedDatabaseError(f"Unsupported database type: {self.type}")
        return f"{driver}:///{self.database}"


class UserRead(BaseModel):
    """Schema dla użytkownika (odczyt)."""

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
