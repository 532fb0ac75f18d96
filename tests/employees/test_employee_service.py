from __future__ import annotations

import asyncio

import pytest

from personnel_console.core.enums import Department
from personnel_console.core.exceptions import ValidationError
from personnel_console.employees.service import EmployeeService


def test_create_employee_trims_and_parses_department(store):
    svc = EmployeeService(store)

    employee = asyncio.run(svc.create_employee(full_name="  Jane Doe ", address="123 Maple Street", department="Finance"))

    assert employee.full_name == "Jane Doe"
    assert employee.department == Department.FINANCE
    assert asyncio.run(svc.get_employee(employee.employee_id)) == employee


def test_create_employee_reports_every_bad_field(store):
    svc = EmployeeService(store)

    with pytest.raises(ValidationError) as exc:
        asyncio.run(svc.create_employee(full_name="Jo", address="abc", department="Legal"))

    assert set(exc.value.errors) == {"full_name", "address", "department"}
    assert asyncio.run(svc.list_employees()) == []


def test_delete_unknown_employee_is_noop(store):
    svc = EmployeeService(store)

    async def scenario():
        jane = await svc.create_employee(full_name="Jane Doe", address="123 Maple Street", department="HR")
        await svc.delete_employee("ghost")
        await svc.delete_employee(jane.employee_id)
        await svc.delete_employee(jane.employee_id)
        return await svc.list_employees()

    assert asyncio.run(scenario()) == []
