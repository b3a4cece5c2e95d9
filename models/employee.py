"""
models/employee.py
------------------
Domain model for a row of the Employees table.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Employee:
    """
    Represents a single employee.

    Attributes:
        first_name: Given name (required).
        last_name: Family name (required).
        title: Job title, e.g. 'Sales Representative'.
        title_of_courtesy: 'Mr.', 'Ms.', 'Dr.', ...
        birth_date: Date of birth.
        hire_date: Date the employee was hired.
        address: Street address.
        city: City.
        region: Region or state.
        postal_code: Postal code.
        country: Country.
        home_phone: Home phone number.
        extension: Internal phone extension.
        notes: Free-form notes.
        reports_to: ID of the employee's manager (not checked here).
        photo_path: URL or path of the employee's photo.
        id: Database primary key (None for new records). Once assigned it
            cannot be changed.
    """
    first_name: str
    last_name: str
    title: Optional[str] = None
    title_of_courtesy: Optional[str] = None
    birth_date: Optional[date] = None
    hire_date: Optional[date] = None
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    home_phone: Optional[str] = None
    extension: Optional[str] = None
    notes: Optional[str] = None
    reports_to: Optional[int] = None
    photo_path: Optional[str] = None
    id: Optional[int] = None

    def __setattr__(self, name, value):
        if name == "id":
            current = self.__dict__.get("id")
            if current is not None and value != current:
                raise AttributeError(f"Employee id is already set to {current}")
        super().__setattr__(name, value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        title = f" ({self.title})" if self.title else ""
        return f"#{self.id} {self.full_name}{title}"
