from __future__ import annotations

import pytest

from checkin_tracker.core.exceptions import NotFoundError, ValidationError
from checkin_tracker.employees.model import DEFAULT_EMPLOYEES


def test_roster_seeds_six_defaults_on_first_access(container):
    employees = container.roster_service.list_employees()

    assert [e.id for e in employees] == ["1", "2", "3", "4", "5", "6"]
    assert [e.employee_number for e in employees] == [f"EMP00{i}" for i in range(1, 7)]
    assert list(employees) == list(DEFAULT_EMPLOYEES)


def test_add_employee_auto_numbers_from_roster_size(container):
    svc = container.roster_service

    employee = svc.add_employee("Jane Doe", "Sales")

    assert employee.employee_number == "EMP007"
    assert employee.id not in {"1", "2", "3", "4", "5", "6"}
    assert employee.id != employee.employee_number
    assert employee.avatar.startswith("https://ui-avatars.com/api/?name=Jane%20Doe")
    assert len(svc.list_employees()) == 7
    assert svc.list_employees()[-1] == employee


def test_add_employee_keeps_given_number_and_trims(container):
    employee = container.roster_service.add_employee("  Ana  ", " IT ", "X-42")

    assert employee.employee_number == "X-42"
    assert employee.name == "Ana"
    assert employee.department == "IT"


def test_blank_employee_number_is_generated(container):
    employee = container.roster_service.add_employee("Ana", "IT", "   ")

    assert employee.employee_number == "EMP007"


def test_auto_number_skips_codes_already_taken(container):
    svc = container.roster_service
    svc.add_employee("Manual", "Ops", "EMP008")

    employee = svc.add_employee("Auto", "Ops")

    assert employee.employee_number == "EMP009"


@pytest.mark.parametrize("name, department", [("", "Sales"), ("   ", "Sales"), ("Jane", ""), ("Jane", "  ")])
def test_add_employee_rejects_blank_fields(container, name, department):
    with pytest.raises(ValidationError):
        container.roster_service.add_employee(name, department)

    assert len(container.roster_service.list_employees()) == 6


def test_ids_are_unique(container):
    svc = container.roster_service
    ids = {svc.add_employee(f"Person {i}", "Ops").id for i in range(20)}

    assert len(ids) == 20


def test_search_by_name_or_number(container):
    svc = container.roster_service

    assert [e.id for e in svc.search("garcía")] == ["2"]
    assert [e.id for e in svc.search("emp00")] == ["1", "2", "3", "4", "5", "6"]
    assert [e.id for e in svc.search("emp005")] == ["5"]
    assert len(svc.search("")) == 6


def test_require_employee(container):
    assert container.roster_service.require_employee("3").name == "Miguel Ángel Torres"

    with pytest.raises(NotFoundError):
        container.roster_service.require_employee("nope")
