# usersvc/data/errors.py


class DatabaseError(Exception):
    """Bazowy wyjątek dla błędów połączenia i konfiguracji."""


class DatabaseNotConnectedError(DatabaseError):
    """Użycie bazy przed connect() lub po close()."""


class UnsupportedDatabaseError(DatabaseError):
    """Nieobsługiwany rodzaj silnika bazy danych."""
