from __future__ import annotations

import pytest

from src.staffing_planner.staffing_planner.distribution.calculator.proportional_calculator import (
    ProportionalDistributionCalculator,
)
from src.staffing_planner.staffing_planner.zones.model import Province


def _province(pid: int, operators: int, start: int = 0, end: int = 24) -> Province:
    return Province(
        province_id=pid,
        name=f"P{pid}",
        zone_id=1,
        work_start_time=start,
        work_end_time=end,
        operators=operators,
    )


@pytest.fixture
def calc():
    return ProportionalDistributionCalculator()


@pytest.mark.parametrize(
    "volume, rate, expected",
    [(160, 80, 2), (161, 80, 3), (0, 80, 0), (79, 80, 1), (100, 0, 0), (100, -5, 0), (90, 7.5, 12)],
)
def test_operators_needed(calc, volume, rate, expected):
    assert calc.operators_needed(volume, rate) == expected


def test_demand_equal_to_capacity_assigns_full_headcount(calc):
    provinces = [_province(1, 6), _province(2, 4)]

    assert calc.distribute(10, provinces, {9}) == {1: 6, 2: 4}


def test_proportional_shares_without_reconciliation(calc):
    provinces = [_province(1, 6), _province(2, 4)]

    assert calc.distribute(5, provinces, {9}) == {1: 3, 2: 2}


def test_demand_above_capacity_is_capped(calc):
    provinces = [_province(1, 6), _province(2, 4)]

    assert calc.distribute(50, provinces, {9}) == {1: 6, 2: 4}


def test_overshoot_taken_from_largest_first(calc):
    provinces = [_province(1, 7), _province(2, 3)]

    # ceil(3.5)=4, ceil(1.5)=2 -> one too many, taken from province 1
    assert calc.distribute(5, provinces, {9}) == {1: 3, 2: 2}


def test_overshoot_ties_follow_input_order(calc):
    provinces = [_province(1, 5), _province(2, 5), _province(3, 5)]

    # every province rounds up to 2; the first two in input order give one back
    assert calc.distribute(4, provinces, {9}) == {1: 1, 2: 1, 3: 2}


def test_staffed_province_never_drops_below_one(calc):
    provinces = [_province(1, 5), _province(2, 5)]

    assert calc.distribute(1, provinces, {9}) == {1: 1, 2: 1}


def test_only_working_provinces_are_considered(calc):
    provinces = [_province(1, 6, 7, 22), _province(2, 4, 0, 6)]

    assert calc.distribute(3, provinces, {10}) == {1: 3}


def test_working_check_uses_any_active_hour(calc):
    provinces = [_province(1, 2, 7, 8), _province(2, 2, 20, 22)]

    assert calc.distribute(10, provinces, {7, 21}) == {1: 2, 2: 2}


def test_no_working_provinces_returns_empty(calc):
    assert calc.distribute(5, [_province(1, 6, 7, 22)], {3}) == {}
    assert calc.distribute(5, [], {9}) == {}


def test_zero_demand_assigns_zero(calc):
    provinces = [_province(1, 6), _province(2, 4)]

    assert calc.distribute(0, provinces, {9}) == {1: 0, 2: 0}


def test_zero_capacity_does_not_divide(calc):
    provinces = [_province(1, 0), _province(2, 0)]

    assert calc.distribute(3, provinces, {9}) == {1: 0, 2: 0}


def test_distribution_bounds_over_demand_range(calc):
    provinces = [_province(1, 9), _province(2, 5), _province(3, 3), _province(4, 1)]
    capacity = 18

    for total in range(0, capacity + 5):
        result = calc.distribute(total, provinces, {12})

        assert sum(result.values()) <= capacity
        for p in provinces:
            assert 0 <= result[p.province_id] <= p.operators
        if total >= capacity:
            assert result == {p.province_id: p.operators for p in provinces}
        elif total >= len(provinces):
            assert sum(result.values()) == total


def test_distribution_is_deterministic(calc):
    provinces = [_province(1, 5), _province(2, 5), _province(3, 5)]

    assert calc.distribute(7, provinces, {9}) == calc.distribute(7, provinces, {9})
