"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.

The repository layer never reads these constants directly: callers build a
``DatabaseConfig`` with ``load_database_config()`` and pass it in.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


# ── Driver ────────────────────────────────────────────────
# One of: "sqlite", "postgresql", "postgresql+pool"
DB_DRIVER: str = os.getenv("DB_DRIVER", "sqlite")

# ── SQLite ────────────────────────────────────────────────
SQLITE_PATH: str = os.getenv("SQLITE_PATH", "northwind.db")

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "northwind")
DB_USER: str = os.getenv("DB_USER", "northwind_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Connection settings handed to a repository.

    Attributes:
        driver: Factory name understood by ``db.connection.create_factory``.
        connection_string: SQLite file path or PostgreSQL DSN/URL.
    """
    driver: str
    connection_string: str


def load_database_config() -> DatabaseConfig:
    """Build a ``DatabaseConfig`` from the loaded environment."""
    if DB_DRIVER == "sqlite":
        return DatabaseConfig(driver=DB_DRIVER, connection_string=SQLITE_PATH)
    return DatabaseConfig(driver=DB_DRIVER, connection_string=DATABASE_URL)
