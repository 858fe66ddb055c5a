# server/core/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv
from core.errors import StartupError


DEFAULT_MAX_CONNECTIONS = 5
HOST = "0.0.0.0"
PORT = 3000


@dataclass(frozen=True)
class Settings:
    database_url: str
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    log_level: str = "INFO"


def normalize_database_url(url: str) -> str:
    # SQLAlchemy only knows the "postgresql" dialect name
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def load_settings() -> Settings:
    """
    Reads process configuration from the environment.
    A local .env file is loaded first when present; real variables take precedence.
    """
    load_dotenv()

    database_url = (os.getenv("DATABASE_URL") or "").strip()
    if not database_url:
        raise StartupError("DATABASE_URL must be set")

    raw_max = os.getenv("DATABASE_MAX_CONNECTIONS")
    max_connections = DEFAULT_MAX_CONNECTIONS
    if raw_max:
        try:
            max_connections = int(raw_max)
        except ValueError:
            raise StartupError(f"DATABASE_MAX_CONNECTIONS must be an integer, got {raw_max!r}")
        if max_connections < 1:
            raise StartupError("DATABASE_MAX_CONNECTIONS must be at least 1")

    return Settings(
        database_url=normalize_database_url(database_url),
        max_connections=max_connections,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
