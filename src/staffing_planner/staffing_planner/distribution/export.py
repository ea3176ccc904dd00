from __future__ import annotations

import csv
import io
from datetime import date

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from ..common.time_utils import format_time
from .model import DistributionPlan

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SCHEDULE_COLUMNS = [
    ("Center Name", 20),
    ("Status", 10),
    ("Work Start", 10),
    ("Work End", 10),
    ("Duration (min)", 15),
    ("Workers", 10),
    ("First Break", 15),
    ("Second Break", 15),
    ("Third Break", 15),
    ("Fourth Break", 15),
]

NOTES = [
    "Notes:",
    "1. Adherence to the specified break schedule is mandatory to ensure optimal service quality.",
    "2. Each operator is entitled to four 10-minute breaks during their shift.",
]


def export_filename(plan: DistributionPlan, generated_on: date) -> str:
    return f"{plan.zone.name}_{plan.day_type.value}_distribution_{generated_on.strftime('%Y%m%d')}.xlsx"


def summary_filename(plan: DistributionPlan) -> str:
    return f"{plan.zone.name}_{plan.day_type.value}_summary.csv"


def _schedule_rows(plan: DistributionPlan, generated_on: date) -> list[list]:
    rows: list[list] = [
        [f"{plan.zone.name} ({plan.day_type.label}) - {generated_on.strftime('%Y%m%d')}"],
        [],
    ]

    for province in plan.zone.provinces:
        shifts = plan.roster_for(province.province_id)
        if not shifts:
            continue

        rows.append(
            [
                province.name,
                "Active",
                format_time(province.work_start_time, 0),
                format_time(province.work_end_time, 0),
                plan.parameters.attendance_duration,
                len(shifts),
            ]
        )
        for shift in shifts:
            rows.append(["", "", shift.start_time, shift.end_time, shift.duration, "", *shift.break_schedule.windows()])
        rows.append([])

    rows.extend([note] for note in NOTES)
    return rows


def summary_rows(plan: DistributionPlan) -> list[list]:
    header = ["Time Period", "Call Volume", *(p.name for p in plan.zone.provinces)]
    rows = [header]
    for period in plan.periods:
        rows.append([period.label, period.total_call_volume, *(d.operators for d in period.provinces)])
    return rows


def build_workbook(plan: DistributionPlan, generated_on: date) -> Workbook:
    """Two sheets: the full per-operator schedule and the hourly summary."""

    wb = Workbook()
    ws = wb.active
    ws.title = "Operator Schedule"
    ws.append([name for name, _ in SCHEDULE_COLUMNS])
    for row in _schedule_rows(plan, generated_on):
        ws.append(row)
    for idx, (_, width) in enumerate(SCHEDULE_COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width

    summary = wb.create_sheet("Distribution Summary")
    for row in summary_rows(plan):
        summary.append(row)

    return wb


def workbook_bytes(wb: Workbook) -> io.BytesIO:
    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)
    return buf


def summary_csv(plan: DistributionPlan) -> bytes:
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerows(summary_rows(plan))
    return out.getvalue().encode("utf-8-sig")
