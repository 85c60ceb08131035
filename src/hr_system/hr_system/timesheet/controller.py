from __future__ import annotations

import csv
import io
import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import coerce_page
from ..core.enums import ViewMode
from ..core.exceptions import ValidationError
from ..container import Container
from ..periods.window import CalendarWindow
from .model import TimesheetFilters

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "date",
    "day",
    "status",
    "check_in",
    "check_out",
    "hours_worked",
    "hours_display",
    "is_recorded",
    "has_work_report",
    "work_report_status",
    "completion_status",
]


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str) -> date:
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError("Invalid date (YYYY-MM-DD)")

    def _window_from_args(args) -> CalendarWindow:
        mode = (args.get("mode") or ViewMode.WEEK.value).lower()
        if mode == ViewMode.CUSTOM.value:
            start, end = args.get("start"), args.get("end")
            if not start or not end:
                raise ValidationError("Custom range needs start and end")
            return CalendarWindow.custom(_parse_date(start), _parse_date(end))

        reference = _parse_date(args["date"]) if args.get("date") else now_local().date()
        return CalendarWindow.around(reference, mode, week_starts_on=container.week_starts_on)

    def _filters_from_args(args) -> TimesheetFilters:
        return TimesheetFilters(
            status=args.get("status", "all"),
            weekday=args.get("day", "all"),
            search=args.get("search", ""),
            work_time=args.get("work_time", "all"),
        )

    @app.route("/api/employees/<employee_id>/timesheet", methods=["GET"], endpoint="employee_timesheet")
    def employee_timesheet(employee_id: str):
        try:
            window = _window_from_args(request.args)
            page = container.timesheet_service.get_page(
                employee_id,
                window,
                filters=_filters_from_args(request.args),
                page=coerce_page(request.args.get("page")),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("[timesheet] view failed for employee=%s", employee_id)
            return jsonify({"success": False, "message": "Failed to load timesheet"}), 500

        return jsonify(
            {
                "success": True,
                "data": {
                    "label": page.label,
                    "rows": [r.to_dict() for r in page.rows],
                    "totals": {
                        "present_days": page.totals.present_days,
                        "absent_days": page.totals.absent_days,
                        "total_hours": page.totals.total_hours,
                        "completed_days": page.totals.completed_days,
                        "completion_rate": page.totals.completion_rate,
                    },
                    "page": page.page,
                    "total_pages": page.total_pages,
                    "total_rows": page.total_rows,
                },
            }
        ), 200

    @app.route("/api/employees/<employee_id>/timesheet.csv", methods=["GET"], endpoint="employee_timesheet_csv")
    def employee_timesheet_csv(employee_id: str):
        try:
            window = _window_from_args(request.args)
            rows = container.timesheet_service.build_rows(employee_id, window)
            rows = container.timesheet_service.apply_filters(rows, _filters_from_args(request.args))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("[timesheet] csv export failed for employee=%s", employee_id)
            return jsonify({"success": False, "message": "Failed to export timesheet"}), 500

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row.to_dict())

        filename = f"timesheet_{employee_id}_{window.start:%Y%m%d}_{window.end:%Y%m%d}.csv"
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
