"""Example: run the planning core directly (no Flask, no database).

Controllers are a thin layer; the distribution and roster logic is plain Python.
"""

from src.staffing_planner.staffing_planner.distribution.calculator.proportional_calculator import (
    ProportionalDistributionCalculator,
)
from src.staffing_planner.staffing_planner.rosters.generator import generate_shifts
from src.staffing_planner.staffing_planner.rosters.queries import active_shifts
from src.staffing_planner.staffing_planner.zones.model import Province


def main():
    provinces = [
        Province(province_id=1, name="Alpha", zone_id=1, work_start_time=7, work_end_time=22, operators=6),
        Province(province_id=2, name="Bravo", zone_id=1, work_start_time=8, work_end_time=20, operators=4),
    ]
    calculator = ProportionalDistributionCalculator()
    rosters = {p.province_id: generate_shifts(p, p.operators) for p in provinces}

    for hour, volume in [(8, 400), (10, 800), (21, 160)]:
        needed = calculator.operators_needed(volume, 80)
        assigned = calculator.distribute(needed, provinces, {hour})
        print(f"{hour:02d}:00 calls={volume} needed={needed} assigned={assigned}")
        for p in provinces:
            for shift in active_shifts(rosters[p.province_id], hour, assigned.get(p.province_id, 0)):
                print(f"    {p.name} #{shift.shift_id} {shift.start_time}-{shift.end_time} {shift.break_schedule.windows()}")


if __name__ == "__main__":
    main()
