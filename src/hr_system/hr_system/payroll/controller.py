from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_month
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_month_arg(value: str | None) -> tuple[int, int]:
        if not value:
            today = now_local().date()
            return today.year, today.month
        try:
            return parse_month(value)
        except ValueError:
            raise ValidationError("Invalid month (YYYY-MM)")

    @app.route("/api/employees/<employee_id>/payroll", methods=["GET"], endpoint="employee_payroll")
    def employee_payroll(employee_id: str):
        try:
            year, month = _parse_month_arg(request.args.get("month"))
            report = container.payroll_report_service.build_monthly_report(employee_id, year=year, month=month)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("[payroll] report failed for employee=%s", employee_id)
            return jsonify({"success": False, "message": "Failed to build payroll report"}), 500

        return jsonify({"success": True, "data": report.to_dict()}), 200
