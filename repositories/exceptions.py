"""
repositories/exceptions.py
--------------------------
Caller-visible errors raised by the repositories.
Driver exceptions never escape a repository unwrapped.
"""

from typing import Optional


class EmployeeServiceError(Exception):
    """
    Base class for all repository errors.

    Attributes:
        message: Human-readable description.
        cause: The lower-level exception, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(EmployeeServiceError):
    """Missing factory or connection string, unknown driver, or no connection produced."""


class ValidationError(EmployeeServiceError):
    """The record passed in is missing or incomplete."""


class NotFoundError(EmployeeServiceError):
    """No employee exists with the requested id."""


class PersistenceError(EmployeeServiceError):
    """The database driver failed while executing a statement."""
