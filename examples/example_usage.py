"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the payroll and timesheet rules live in services.
"""

import importlib
import json
from pathlib import Path

from config import get_settings_module

from src.hr_system.hr_system.container import build_container
from src.hr_system.hr_system.periods.window import CalendarWindow


def main():
    settings = importlib.import_module(get_settings_module())
    seed = json.loads((Path(__file__).resolve().parents[1] / "data" / "seed.json").read_text(encoding="utf-8"))
    container = build_container(settings=settings, seed=seed)

    report = container.payroll_report_service.build_monthly_report("E001", year=2025, month=4)
    print(json.dumps(report.to_dict(), indent=2))

    page = container.timesheet_service.get_page("E001", CalendarWindow.around("2025-04-02", "week"))
    print(page.label)
    for row in page.rows:
        print(row.date, row.status, row.hours_display, row.completion_status.value)


if __name__ == "__main__":
    main()
