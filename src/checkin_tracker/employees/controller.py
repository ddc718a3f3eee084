from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import StorageError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def employee_json(employee) -> dict:
    return {
        "id": employee.id,
        "name": employee.name,
        "employee_number": employee.employee_number,
        "department": employee.department,
        "avatar": employee.avatar,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        """Roster ranked by rolling fault count, optionally filtered by ``q``."""
        try:
            employees = container.roster_service.search(request.args.get("q", ""))
            ranked = container.fault_service.rank_employees(employees)
        except StorageError:
            logger.exception("Failed to load roster")
            return jsonify({"success": False, "message": "Storage error while loading employees"}), 500

        return jsonify(
            {
                "success": True,
                "employees": [
                    {
                        **employee_json(s.employee),
                        "fault_count": s.fault_count,
                        "fault_tier": s.tier.value,
                        "late_total": s.late_total,
                    }
                    for s in ranked
                ],
            }
        )

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            employee = container.roster_service.add_employee(
                name=str(data.get("name") or ""),
                department=str(data.get("department") or ""),
                employee_number=str(data.get("employee_number") or "") or None,
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except StorageError:
            logger.exception("Failed to add employee")
            return jsonify({"success": False, "message": "Storage error while adding employee"}), 500

        return jsonify({"success": True, "employee": employee_json(employee)}), 201
