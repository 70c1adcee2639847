# usersvc/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_TYPE = os.getenv("DATABASE_TYPE", "sqlite")
DATABASE_NAME = os.getenv("DATABASE_NAME", ":memory:")
DATABASE_SYNCHRONIZE = _flag("DATABASE_SYNCHRONIZE", "true")
DATABASE_DROP_SCHEMA = _flag("DATABASE_DROP_SCHEMA", "false")
DATABASE_LOGGING = _flag("DATABASE_LOGGING", "false")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
