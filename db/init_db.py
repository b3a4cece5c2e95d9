"""
db/init_db.py
-------------
Creates the Employees table if it does not already exist.
Run this module directly to initialize the configured database:
    python -m db.init_db
"""

from contextlib import closing

from db.connection import ConnectionFactory
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS_SQL = """
    FirstName       VARCHAR(10) NOT NULL,
    LastName        VARCHAR(20) NOT NULL,
    Title           VARCHAR(30),
    TitleOfCourtesy VARCHAR(25),
    BirthDate       DATE,
    HireDate        DATE,
    Address         VARCHAR(60),
    City            VARCHAR(15),
    Region          VARCHAR(15),
    PostalCode      VARCHAR(10),
    Country         VARCHAR(15),
    HomePhone       VARCHAR(24),
    Extension       VARCHAR(4),
    Notes           TEXT,
    ReportsTo       INTEGER REFERENCES Employees(EmployeeID),
    PhotoPath       VARCHAR(255)
"""

SCHEMA_SQL = {
    # Employees table: Northwind staff, self-referencing through ReportsTo
    "sqlite": f"""
CREATE TABLE IF NOT EXISTS Employees (
    EmployeeID      INTEGER PRIMARY KEY AUTOINCREMENT,{_COLUMNS_SQL}
);
CREATE INDEX IF NOT EXISTS idx_employees_last_name ON Employees(LastName);
""",
    "postgresql": f"""
CREATE TABLE IF NOT EXISTS Employees (
    EmployeeID      SERIAL PRIMARY KEY,{_COLUMNS_SQL}
);
CREATE INDEX IF NOT EXISTS idx_employees_last_name ON Employees(LastName);
""",
}


def create_tables(factory: ConnectionFactory, connection_string: str) -> None:
    """
    Execute the schema SQL for the factory's dialect.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        RuntimeError: If the factory does not produce a connection.
    """
    schema = SCHEMA_SQL[factory.dialect]
    conn = factory.connect(connection_string)
    if conn is None:
        logger.error("Failed to initialize schema: connection factory returned no connection.")
        raise RuntimeError("Connection factory did not produce a connection.")
    try:
        with closing(conn.cursor()) as cur:
            for statement in schema.split(";"):
                if statement.strip():
                    cur.execute(statement)
        conn.commit()
        logger.info(f"Employees schema initialized ({factory.dialect}).")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        factory.release(conn)


if __name__ == "__main__":
    from config import load_database_config
    from db.connection import create_factory

    db_config = load_database_config()
    create_tables(create_factory(db_config.driver), db_config.connection_string)
    print("Database schema created successfully.")
