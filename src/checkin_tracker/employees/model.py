from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the roster.

    Note: Plain data object; ``id`` never changes once assigned.
    """

    id: str
    name: str
    employee_number: str
    department: str
    avatar: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "employeeNumber": self.employee_number,
            "department": self.department,
            "avatar": self.avatar,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            employee_number=str(data.get("employeeNumber") or ""),
            department=str(data.get("department") or ""),
            avatar=str(data.get("avatar") or ""),
        )


DEFAULT_EMPLOYEES: tuple[Employee, ...] = (
    Employee(
        id="1",
        name="Carlos Rodríguez",
        employee_number="EMP001",
        department="Ventas",
        avatar="https://picsum.photos/seed/carlos/200/200",
    ),
    Employee(
        id="2",
        name="Ana García",
        employee_number="EMP002",
        department="Recursos Humanos",
        avatar="https://picsum.photos/seed/ana/200/200",
    ),
    Employee(
        id="3",
        name="Miguel Ángel Torres",
        employee_number="EMP003",
        department="Desarrollo",
        avatar="https://picsum.photos/seed/miguel/200/200",
    ),
    Employee(
        id="4",
        name="Lucía Fernández",
        employee_number="EMP004",
        department="Marketing",
        avatar="https://picsum.photos/seed/lucia/200/200",
    ),
    Employee(
        id="5",
        name="Roberto Sánchez",
        employee_number="EMP005",
        department="Logística",
        avatar="https://picsum.photos/seed/roberto/200/200",
    ),
    Employee(
        id="6",
        name="Elena Díaz",
        employee_number="EMP006",
        department="Desarrollo",
        avatar="https://picsum.photos/seed/elena/200/200",
    ),
)
