from __future__ import annotations

from datetime import date

from openpyxl import load_workbook

from src.staffing_planner.staffing_planner.core.enums import DayType
from src.staffing_planner.staffing_planner.distribution.export import (
    NOTES,
    build_workbook,
    export_filename,
    summary_csv,
    summary_rows,
    workbook_bytes,
)
from src.staffing_planner.staffing_planner.distribution.model import (
    DistributionPeriod,
    DistributionPlan,
    ProvinceDistribution,
)
from src.staffing_planner.staffing_planner.parameters.model import SystemParameters
from src.staffing_planner.staffing_planner.rosters.generator import generate_shifts
from src.staffing_planner.staffing_planner.zones.model import Province, Zone

GENERATED_ON = date(2026, 10, 19)


def _plan(day_type=DayType.REGULAR) -> DistributionPlan:
    alpha = Province(1, "Alpha", 1, 7, 22, 2)
    bravo = Province(2, "Bravo", 1, 8, 20, 0)
    zone = Zone(1, "North", provinces=(alpha, bravo))
    rosters = {1: tuple(generate_shifts(alpha, 2)), 2: ()}
    periods = (
        DistributionPeriod(
            hour=7,
            total_call_volume=160,
            operators_needed=2,
            provinces=(
                ProvinceDistribution(1, "Alpha", 2, 0, rosters[1]),
                ProvinceDistribution(2, "Bravo", 0, 0),
            ),
        ),
        DistributionPeriod(
            hour=8,
            total_call_volume=40,
            operators_needed=1,
            provinces=(
                ProvinceDistribution(1, "Alpha", 1, 0, rosters[1][:1]),
                ProvinceDistribution(2, "Bravo", 0, 0),
            ),
        ),
    )
    return DistributionPlan(zone=zone, day_type=day_type, parameters=SystemParameters(), periods=periods, rosters=rosters)


def test_export_filename():
    assert export_filename(_plan(), GENERATED_ON) == "North_regular_distribution_20261019.xlsx"
    assert export_filename(_plan(DayType.HOLIDAY), GENERATED_ON) == "North_holiday_distribution_20261019.xlsx"


def test_schedule_sheet_layout():
    wb = build_workbook(_plan(), GENERATED_ON)

    assert wb.sheetnames == ["Operator Schedule", "Distribution Summary"]
    ws = wb["Operator Schedule"]
    assert ws.cell(row=1, column=1).value == "Center Name"
    assert ws.cell(row=1, column=10).value == "Fourth Break"
    assert ws.cell(row=2, column=1).value == "North (Regular Days) - 20261019"

    header = [ws.cell(row=4, column=c).value for c in range(1, 7)]
    assert header == ["Alpha", "Active", "07:00", "22:00", 420, 2]

    first_shift = [ws.cell(row=5, column=c).value for c in (3, 4, 5, 7, 10)]
    assert first_shift == ["07:00", "14:00", 420, "08:24-08:34", "12:36-12:46"]
    assert ws.cell(row=6, column=3).value == "07:15"


def test_provinces_without_shifts_are_left_out_of_schedule():
    ws = build_workbook(_plan(), GENERATED_ON)["Operator Schedule"]

    names = [ws.cell(row=r, column=1).value for r in range(1, ws.max_row + 1)]
    assert "Bravo" not in names
    assert names[-3:] == NOTES


def test_holiday_title():
    ws = build_workbook(_plan(DayType.HOLIDAY), GENERATED_ON)["Operator Schedule"]

    assert ws.cell(row=2, column=1).value == "North (Holiday Days) - 20261019"


def test_summary_rows():
    assert summary_rows(_plan()) == [
        ["Time Period", "Call Volume", "Alpha", "Bravo"],
        ["7:00 - 8:00", 160, 2, 0],
        ["8:00 - 9:00", 40, 1, 0],
    ]


def test_workbook_bytes_round_trip_through_openpyxl():
    buf = workbook_bytes(build_workbook(_plan(), GENERATED_ON))

    wb = load_workbook(buf)
    summary = wb["Distribution Summary"]
    assert [c.value for c in summary[2]] == ["7:00 - 8:00", 160, 2, 0]


def test_summary_csv_has_bom_and_rows():
    data = summary_csv(_plan())

    assert data.startswith(b"\xef\xbb\xbf")
    lines = data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Time Period,Call Volume,Alpha,Bravo"
    assert lines[1] == "7:00 - 8:00,160,2,0"
