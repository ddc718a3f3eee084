"""Example: drive the service layer without Flask.

Uses in-memory storage so nothing is written to disk.
"""

from checkin_tracker.container import build_container
from checkin_tracker.storage.memory_storage import InMemoryStorage


def main():
    container = build_container(storage=InMemoryStorage())

    employee = container.roster_service.add_employee("Jane Doe", "Sales")
    container.attendance_service.add_record(employee.id)

    print(container.attendance_service.get_history_ui(employee.id, limit=5))
    for summary in container.fault_service.rank_employees(container.roster_service.list_employees()):
        print(summary.employee.employee_number, summary.employee.name, summary.fault_count, summary.tier.value)


if __name__ == "__main__":
    main()
