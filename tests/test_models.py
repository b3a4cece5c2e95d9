"""Tests for models.employee.Employee."""
import pytest

from models.employee import Employee


def test_optional_fields_default_to_none():
    employee = Employee(first_name="Nancy", last_name="Davolio")
    assert employee.id is None
    assert employee.title is None
    assert employee.reports_to is None


def test_id_can_be_assigned_once():
    employee = Employee(first_name="Nancy", last_name="Davolio")
    employee.id = 1
    employee.id = 1
    with pytest.raises(AttributeError):
        employee.id = 2
    assert employee.id == 1


def test_id_from_constructor_is_fixed():
    employee = Employee(first_name="Nancy", last_name="Davolio", id=7)
    with pytest.raises(AttributeError):
        employee.id = None


def test_str():
    employee = Employee(first_name="Andrew", last_name="Fuller", title="Vice President, Sales", id=2)
    assert str(employee) == "#2 Andrew Fuller (Vice President, Sales)"
    assert Employee(first_name="A", last_name="B").full_name == "A B"
