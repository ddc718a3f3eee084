from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, send_file

from ..core.exceptions import NotFoundError, StorageError
from ..container import Container
from .csv_export import export_filename, write_report_csv

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/records.csv", methods=["GET"], endpoint="employee_records_csv")
    def employee_records_csv(employee_id: str):
        try:
            data = container.report_service.build_employee_export(employee_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except StorageError:
            logger.exception("CSV export failed for employee %s", employee_id)
            return jsonify({"success": False, "message": "Storage error while exporting"}), 500

        return send_file(
            io.BytesIO(write_report_csv(data.rows)),
            mimetype="text/csv",
            as_attachment=True,
            download_name=export_filename(data.employee),
        )

    @app.route("/api/records/<record_id>/acta", methods=["GET"], endpoint="record_acta")
    def record_acta(record_id: str):
        """Printable administrative record for one check-in."""
        try:
            acta = container.report_service.build_acta(record_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except StorageError:
            logger.exception("Acta generation failed for record %s", record_id)
            return jsonify({"success": False, "message": "Storage error while building acta"}), 500

        return app.response_class(acta.render_text(), mimetype="text/plain")
