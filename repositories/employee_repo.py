"""
repositories/employee_repo.py
-----------------------------
Data access layer for the Employees table.
All SQL for employees lives here. Every value reaches the database as a
bound parameter; statement text is never built from caller input.
"""

from contextlib import closing
from datetime import date, datetime
from typing import Any, Optional

from config import DatabaseConfig
from db.connection import ConnectionFactory, create_factory
from models.employee import Employee
from repositories.exceptions import (
    ConfigurationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from utils.logger import get_logger

logger = get_logger(__name__)

LIST_SQL = "SELECT EmployeeID, FirstName, LastName, Title FROM Employees"

GET_SQL = (
    "SELECT EmployeeID, FirstName, LastName, Title, TitleOfCourtesy, BirthDate, "
    "HireDate, Address, City, Region, PostalCode, Country, HomePhone, Extension, "
    "Notes, ReportsTo, PhotoPath FROM Employees WHERE EmployeeID = :id"
)

INSERT_SQL = (
    "INSERT INTO Employees (FirstName, LastName, Title) "
    "VALUES (:firstName, :lastName, :title)"
)

DELETE_SQL = "DELETE FROM Employees WHERE EmployeeID = :id"

UPDATE_SQL = (
    "UPDATE Employees SET FirstName=:firstName, LastName=:lastName, Title=:title, "
    "TitleOfCourtesy=:titleOfCourtesy, BirthDate=:birthDate, HireDate=:hireDate, "
    "Address=:address, City=:city, Region=:region, PostalCode=:postalCode, "
    "Country=:country, HomePhone=:homePhone, Extension=:extension, Notes=:notes, "
    "ReportsTo=:reportsTo, PhotoPath=:photoPath WHERE EmployeeID=:id"
)


class EmployeeRepository:
    """Repository for CRUD operations on the Employees table."""

    def __init__(self, factory: ConnectionFactory, connection_string: str):
        """
        Args:
            factory: Produces and releases DB-API connections.
            connection_string: Passed to the factory on every call.

        Raises:
            ConfigurationError: If the factory is missing or the connection
                string is empty or whitespace.
        """
        if factory is None:
            raise ConfigurationError("Database connection factory cannot be None.")
        if connection_string is None or not connection_string.strip():
            raise ConfigurationError(
                "Connection string cannot be empty or contain only white-space characters."
            )
        self._factory = factory
        self._connection_string = connection_string

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "EmployeeRepository":
        """Build a repository for the driver named in ``config``."""
        if config is None:
            raise ConfigurationError("Database configuration cannot be None.")
        try:
            factory = create_factory(config.driver)
        except ValueError as e:
            raise ConfigurationError(str(e), e) from e
        return cls(factory, config.connection_string)

    # ── READ ──────────────────────────────────────────────

    def list_employees(self) -> list[Employee]:
        """
        Fetch every employee with the short column set
        (id, first name, last name, title).

        Returns:
            List of Employee objects in the store's default order.
        """
        conn = self._open()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(self._sql(LIST_SQL))
                return [self._row_to_employee(r) for r in self._fetch_dicts(cur)]
        except Exception as e:
            logger.error(f"Failed to list employees: {e}")
            raise PersistenceError("An error occurred while listing employees.", e) from e
        finally:
            self._factory.release(conn)

    def get_employee(self, employee_id: int) -> Employee:
        """
        Fetch a single employee with all columns.

        Raises:
            NotFoundError: If no row has this id.
            PersistenceError: If the query fails.
        """
        conn = self._open()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(self._sql(GET_SQL), {"id": employee_id})
                rows = self._fetch_dicts(cur)
        except Exception as e:
            logger.error(f"Failed to fetch employee #{employee_id}: {e}")
            raise PersistenceError(
                f"An error occurred while fetching employee {employee_id}.", e
            ) from e
        finally:
            self._factory.release(conn)

        if not rows:
            raise NotFoundError(f"Employee with ID {employee_id} not found.")
        return self._row_to_employee(rows[0])

    # ── CREATE ────────────────────────────────────────────

    def add_employee(self, employee: Employee) -> int:
        """
        Insert a new employee (first name, last name, title).

        Args:
            employee: The Employee to persist. Its ``id`` is filled in when unset.

        Returns:
            The store-generated EmployeeID.
        """
        if employee is None:
            raise ValidationError("Employee cannot be None.")
        self._require_names(employee)

        sql = self._sql(INSERT_SQL)
        if self._factory.supports_returning:
            sql += " RETURNING EmployeeID"
        params = {
            "firstName": employee.first_name,
            "lastName": employee.last_name,
            "title": employee.title,
        }

        conn = self._open()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(sql, params)
                if self._factory.supports_returning:
                    new_id = cur.fetchone()[0]
                else:
                    new_id = cur.lastrowid
            conn.commit()
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to add employee {employee.full_name}: {e}")
            raise PersistenceError("An error occurred while adding the employee.", e) from e
        finally:
            self._factory.release(conn)

        if employee.id is None:
            employee.id = new_id
        logger.info(f"Added employee #{new_id} ({employee.full_name})")
        return new_id

    # ── DELETE ────────────────────────────────────────────

    def remove_employee(self, employee_id: int) -> None:
        """Delete an employee by ID. Deleting a missing ID is not an error."""
        conn = self._open()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(self._sql(DELETE_SQL), {"id": employee_id})
                deleted = cur.rowcount > 0
            conn.commit()
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to remove employee #{employee_id}: {e}")
            raise PersistenceError("An error occurred while removing the employee.", e) from e
        finally:
            self._factory.release(conn)

        if deleted:
            logger.info(f"Removed employee #{employee_id}")

    # ── UPDATE ────────────────────────────────────────────

    def update_employee(self, employee: Employee) -> None:
        """
        Overwrite every mutable column of an existing employee.

        Args:
            employee: Employee with updated fields (must have id set).

        Raises:
            ValidationError: If the employee, its id, or its names are missing.
            NotFoundError: If no row has the employee's id.
            PersistenceError: If the update fails.
        """
        if employee is None:
            raise ValidationError("Employee cannot be None.")
        if employee.id is None:
            raise ValidationError("Employee id must be set before updating.")
        self._require_names(employee)
        params = self._update_params(employee)

        conn = self._open()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(self._sql(UPDATE_SQL), params)
                updated = cur.rowcount
            conn.commit()
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to update employee #{employee.id}: {e}")
            raise PersistenceError("An error occurred while updating the employee.", e) from e
        finally:
            self._factory.release(conn)

        if updated == 0:
            raise NotFoundError(f"Employee with ID {employee.id} not found; nothing updated.")
        logger.info(f"Updated employee #{employee.id}")

    # ── HELPERS ───────────────────────────────────────────

    def _open(self):
        """Open a connection through the factory."""
        try:
            conn = self._factory.connect(self._connection_string)
        except Exception as e:
            logger.error(f"Failed to connect to the database: {e}")
            raise PersistenceError("Cannot connect to the database.", e) from e
        if conn is None:
            raise ConfigurationError("Connection factory did not produce a connection.")
        return conn

    @staticmethod
    def _rollback(conn) -> None:
        """Roll back, logging instead of raising so the original failure is reported."""
        try:
            conn.rollback()
        except Exception as e:
            logger.error(f"Rollback failed: {e}")

    def _sql(self, sql: str) -> str:
        return self._factory.format_sql(sql)

    @staticmethod
    def _require_names(employee: Employee) -> None:
        if not employee.first_name or not employee.last_name:
            raise ValidationError("Employee first and last name are required.")

    @staticmethod
    def _fetch_dicts(cur) -> list[dict[str, Any]]:
        """Fetch all rows as dicts keyed by lower-cased column name."""
        columns = [d[0].lower() for d in cur.description]
        return [dict(zip(columns, row)) for row in cur.fetchall()]

    @classmethod
    def _update_params(cls, employee: Employee) -> dict[str, Any]:
        return {
            "id": employee.id,
            "firstName": employee.first_name,
            "lastName": employee.last_name,
            "title": employee.title,
            "titleOfCourtesy": employee.title_of_courtesy,
            "birthDate": cls._date_to_db(employee.birth_date),
            "hireDate": cls._date_to_db(employee.hire_date),
            "address": employee.address,
            "city": employee.city,
            "region": employee.region,
            "postalCode": employee.postal_code,
            "country": employee.country,
            "homePhone": employee.home_phone,
            "extension": employee.extension,
            "notes": employee.notes,
            "reportsTo": employee.reports_to,
            "photoPath": employee.photo_path,
        }

    @staticmethod
    def _date_to_db(value: Optional[date]) -> Optional[str]:
        """Dates are bound as ISO strings so SQLite and PostgreSQL both accept them."""
        if value is None:
            return None
        if not isinstance(value, date):
            raise ValidationError(f"Expected a date, got {type(value).__name__}: {value!r}")
        return value.isoformat()

    @staticmethod
    def _date_from_db(value) -> Optional[date]:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])

    @classmethod
    def _row_to_employee(cls, row: dict[str, Any]) -> Employee:
        """Convert a row dict (lower-cased column names) to an Employee."""
        return Employee(
            id=row["employeeid"],
            first_name=row["firstname"],
            last_name=row["lastname"],
            title=row.get("title"),
            title_of_courtesy=row.get("titleofcourtesy"),
            birth_date=cls._date_from_db(row.get("birthdate")),
            hire_date=cls._date_from_db(row.get("hiredate")),
            address=row.get("address"),
            city=row.get("city"),
            region=row.get("region"),
            postal_code=row.get("postalcode"),
            country=row.get("country"),
            home_phone=row.get("homephone"),
            extension=row.get("extension"),
            notes=row.get("notes"),
            reports_to=row.get("reportsto"),
            photo_path=row.get("photopath"),
        )
