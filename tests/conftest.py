"""Shared test fixtures: a temp-file SQLite database with the Employees schema."""
import pytest

from db.connection import SqliteConnectionFactory
from db.init_db import create_tables
from repositories.employee_repo import EmployeeRepository


class RecordingFactory(SqliteConnectionFactory):
    """SQLite factory that counts connects and releases."""

    def __init__(self):
        self.opened = 0
        self.released = 0

    def connect(self, connection_string):
        self.opened += 1
        return super().connect(connection_string)

    def release(self, conn):
        self.released += 1
        super().release(conn)


@pytest.fixture
def db_path(tmp_path):
    """Return a fresh database path inside a temp directory."""
    return str(tmp_path / "northwind_test.db")


@pytest.fixture
def factory():
    return RecordingFactory()


@pytest.fixture
def repo(factory, db_path):
    """Return a repository over a freshly initialised database."""
    create_tables(factory, db_path)
    factory.opened = factory.released = 0
    return EmployeeRepository(factory, db_path)
