from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, StorageError, ValidationError
from ..container import Container
from ..employees.controller import employee_json

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/checkins", methods=["POST"], endpoint="checkin")
    def checkin(employee_id: str):
        try:
            employee = container.roster_service.require_employee(employee_id)
            record = container.attendance_service.add_record(employee.id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except StorageError:
            logger.exception("Check-in failed for employee %s", employee_id)
            return jsonify({"success": False, "message": "Storage error while checking in"}), 500

        decision = container.attendance_service.classify(record)
        return (
            jsonify(
                {
                    "success": True,
                    "message": f"Attendance recorded for {employee.name}",
                    "record": {
                        "id": record.id,
                        "employee_id": record.employee_id,
                        "timestamp": record.timestamp.isoformat(),
                        "status": decision.status.label,
                        "is_late": decision.is_late,
                    },
                }
            ),
            201,
        )

    @app.route("/api/employees/<employee_id>/records", methods=["GET"], endpoint="employee_records")
    def employee_records(employee_id: str):
        try:
            employee = container.roster_service.require_employee(employee_id)
            rows = container.attendance_service.get_history_ui(employee_id)
            fault_count = container.fault_service.get_fault_count(employee_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except StorageError:
            logger.exception("Failed to load history for employee %s", employee_id)
            return jsonify({"success": False, "message": "Storage error while loading history"}), 500

        return jsonify(
            {
                "success": True,
                "employee": employee_json(employee),
                "fault_count": fault_count,
                "late_total": sum(1 for r in rows if r["is_late"]),
                "records": rows,
            }
        )

    @app.route("/api/records/<record_id>", methods=["PATCH"], endpoint="amend_record")
    def amend_record(record_id: str):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        timestamp = data.get("timestamp")
        if not timestamp:
            return jsonify({"success": False, "message": "timestamp is required"}), 400

        try:
            updated = container.attendance_service.update_record(record_id, str(timestamp))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except StorageError:
            logger.exception("Failed to amend record %s", record_id)
            return jsonify({"success": False, "message": "Storage error while amending record"}), 500

        if not updated:
            return jsonify({"success": False, "message": f"Record {record_id} does not exist"}), 404
        return jsonify({"success": True, "message": "Record updated"})
