"""Tests for db.init_db.create_tables."""
import sqlite3

import pytest

from db.connection import SqliteConnectionFactory
from db.init_db import SCHEMA_SQL, create_tables


def _columns(db_path):
    conn = sqlite3.connect(db_path)
    try:
        return [row[1] for row in conn.execute("PRAGMA table_info(Employees)")]
    finally:
        conn.close()


def test_creates_employees_table(db_path):
    create_tables(SqliteConnectionFactory(), db_path)
    assert _columns(db_path) == [
        "EmployeeID", "FirstName", "LastName", "Title", "TitleOfCourtesy",
        "BirthDate", "HireDate", "Address", "City", "Region", "PostalCode",
        "Country", "HomePhone", "Extension", "Notes", "ReportsTo", "PhotoPath",
    ]


def test_idempotent(db_path):
    factory = SqliteConnectionFactory()
    create_tables(factory, db_path)
    create_tables(factory, db_path)
    assert len(_columns(db_path)) == 17


def test_connection_released(factory, db_path):
    create_tables(factory, db_path)
    assert factory.opened == factory.released == 1


def test_every_dialect_has_schema():
    assert set(SCHEMA_SQL) == {"sqlite", "postgresql"}
    assert "SERIAL PRIMARY KEY" in SCHEMA_SQL["postgresql"]


class _NoConnectionFactory(SqliteConnectionFactory):
    def connect(self, connection_string):
        return None


def test_missing_connection_raises(db_path):
    with pytest.raises(RuntimeError, match="did not produce a connection"):
        create_tables(_NoConnectionFactory(), db_path)
