"""
db/connection.py
----------------
Connection factories for the supported database drivers.

A factory turns a connection string into a DB-API connection, releases it
when the caller is done, and rewrites ``:name`` placeholders into the
driver's paramstyle. Repositories only talk to this interface, so the same
SQL runs on SQLite (sqlite3) and PostgreSQL (psycopg2).
"""

import re
import sqlite3

import psycopg2
from psycopg2 import pool

from utils.logger import get_logger

logger = get_logger(__name__)

# ":name" but not "::type" casts
_NAMED_PARAM = re.compile(r"(?<![:\w]):([A-Za-z_]\w*)")


class ConnectionFactory:
    """Base class for connection factories."""

    dialect: str = ""
    supports_returning: bool = False

    def connect(self, connection_string: str):
        """
        Open a new connection.

        Args:
            connection_string: Driver-specific connection string.

        Returns:
            A DB-API connection, or None if the driver produced nothing.
        """
        raise NotImplementedError

    def release(self, conn) -> None:
        """Give a connection back. Closes it by default."""
        conn.close()

    def format_sql(self, sql: str) -> str:
        """Rewrite ``:name`` placeholders for this driver."""
        return sql


class SqliteConnectionFactory(ConnectionFactory):
    """sqlite3 connections; the connection string is a file path."""

    dialect = "sqlite"

    def connect(self, connection_string: str):
        return sqlite3.connect(connection_string)


class PostgresConnectionFactory(ConnectionFactory):
    """One psycopg2 connection per call; the connection string is a DSN or URL."""

    dialect = "postgresql"
    supports_returning = True

    def connect(self, connection_string: str):
        return psycopg2.connect(connection_string)

    def format_sql(self, sql: str) -> str:
        return _NAMED_PARAM.sub(r"%(\1)s", sql)


class PooledPostgresConnectionFactory(PostgresConnectionFactory):
    """
    psycopg2 connections served from a SimpleConnectionPool.

    One pool is created lazily per connection string. ``release`` returns the
    connection to its pool instead of closing it.
    """

    def __init__(self, min_conn: int = 1, max_conn: int = 5):
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pools: dict[str, pool.SimpleConnectionPool] = {}
        self._owners: dict[int, pool.SimpleConnectionPool] = {}

    def _get_pool(self, connection_string: str) -> pool.SimpleConnectionPool:
        conn_pool = self._pools.get(connection_string)
        if conn_pool is None:
            try:
                conn_pool = pool.SimpleConnectionPool(
                    self.min_conn, self.max_conn, connection_string
                )
            except psycopg2.OperationalError as e:
                logger.error(f"Failed to initialize database pool: {e}")
                raise
            self._pools[connection_string] = conn_pool
            logger.info("Database connection pool initialized successfully.")
        return conn_pool

    def connect(self, connection_string: str):
        conn_pool = self._get_pool(connection_string)
        conn = conn_pool.getconn()
        self._owners[id(conn)] = conn_pool
        return conn

    def release(self, conn) -> None:
        conn_pool = self._owners.pop(id(conn), None)
        if conn_pool is None:
            conn.close()
            return
        conn_pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in every pool."""
        for conn_pool in self._pools.values():
            conn_pool.closeall()
        self._pools.clear()
        self._owners.clear()
        logger.info("Database connection pools closed.")


_FACTORIES = {
    "sqlite": SqliteConnectionFactory,
    "postgresql": PostgresConnectionFactory,
    "postgresql+pool": PooledPostgresConnectionFactory,
}


def create_factory(driver: str) -> ConnectionFactory:
    """
    Instantiate the factory registered for a driver name.

    Raises:
        ValueError: If the driver name is unknown.
    """
    try:
        factory_cls = _FACTORIES[driver]
    except KeyError:
        raise ValueError(
            f"Unknown database driver {driver!r}; expected one of {sorted(_FACTORIES)}"
        ) from None
    return factory_cls()
