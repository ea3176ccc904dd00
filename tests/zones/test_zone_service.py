from __future__ import annotations

import pytest

from src.staffing_planner.staffing_planner.core.exceptions import NotFoundError, ValidationError
from src.staffing_planner.staffing_planner.zones.model import Province, Zone, ZoneSummary, working_hours_label
from src.staffing_planner.staffing_planner.zones.service import ProvinceService, ZoneService


class FakeZonesRepo:
    def __init__(self):
        self._next_id = 1
        self._zones: dict[int, Zone] = {}

    def list_summaries(self):
        return [ZoneSummary(z.zone_id, z.name, z.description, 0, 0) for z in self._zones.values()]

    def get_by_id(self, zone_id):
        return self._zones.get(int(zone_id))

    def create(self, *, name, description):
        zid = self._next_id
        self._next_id += 1
        self._zones[zid] = Zone(zid, name, description)
        return zid

    def delete(self, zone_id):
        return self._zones.pop(int(zone_id), None) is not None


class FakeProvincesRepo:
    def __init__(self):
        self._next_id = 1
        self._provinces: dict[int, Province] = {}

    def list_all(self):
        return list(self._provinces.values())

    def list_for_zone(self, zone_id):
        return [p for p in self._provinces.values() if p.zone_id == zone_id]

    def create(self, *, name, zone_id, work_start_time, work_end_time, operators):
        pid = self._next_id
        self._next_id += 1
        self._provinces[pid] = Province(pid, name, zone_id, work_start_time, work_end_time, operators)
        return pid

    def delete(self, province_id):
        return self._provinces.pop(int(province_id), None) is not None


@pytest.fixture
def repos():
    return FakeZonesRepo(), FakeProvincesRepo()


def test_create_zone_and_load_with_provinces(repos):
    zones_repo, provinces_repo = repos
    zones = ZoneService(zones_repo, provinces_repo)
    provinces = ProvinceService(provinces_repo, zones_repo)

    zid = zones.create(name="  North  ", description=None)
    provinces.create(name="Alpha", zone_id=zid, work_start_time=7, work_end_time=22, operators=12)
    provinces.create(name="Bravo", zone_id=str(zid), work_start_time="8", work_end_time="20", operators="8")

    zone = zones.get_with_provinces(zid)
    assert zone.name == "North"
    assert zone.description == ""
    assert [(p.name, p.work_start_time, p.operators) for p in zone.provinces] == [("Alpha", 7, 12), ("Bravo", 8, 8)]


def test_zone_name_required(repos):
    zones = ZoneService(*repos)

    with pytest.raises(ValidationError):
        zones.create(name="   ")


@pytest.mark.parametrize("name", [None, 123, ["North"]])
def test_zone_name_must_be_text(repos, name):
    zones = ZoneService(*repos)

    with pytest.raises(ValidationError):
        zones.create(name=name)


def test_missing_zone_raises_not_found(repos):
    zones = ZoneService(*repos)

    with pytest.raises(NotFoundError):
        zones.get_with_provinces(5)
    with pytest.raises(NotFoundError):
        zones.delete(5)


@pytest.mark.parametrize(
    "start, end, operators",
    [(22, 7, 1), (8, 8, 1), (-1, 10, 1), (0, 25, 1), (7, 22, -1), ("seven", 22, 1)],
)
def test_province_validation(repos, start, end, operators):
    zones_repo, provinces_repo = repos
    zid = ZoneService(zones_repo, provinces_repo).create(name="North")
    provinces = ProvinceService(provinces_repo, zones_repo)

    with pytest.raises(ValidationError):
        provinces.create(name="Alpha", zone_id=zid, work_start_time=start, work_end_time=end, operators=operators)


def test_province_needs_existing_zone(repos):
    zones_repo, provinces_repo = repos
    provinces = ProvinceService(provinces_repo, zones_repo)

    with pytest.raises(NotFoundError):
        provinces.create(name="Alpha", zone_id=3, work_start_time=7, work_end_time=22, operators=1)


def test_full_day_province_allowed(repos):
    zones_repo, provinces_repo = repos
    zid = ZoneService(zones_repo, provinces_repo).create(name="North")
    provinces = ProvinceService(provinces_repo, zones_repo)

    pid = provinces.create(name="Night", zone_id=zid, work_start_time=0, work_end_time=24, operators=4)

    (province,) = provinces.list_all()
    assert province.province_id == pid
    assert province.is_full_day
    assert working_hours_label(province) == "24 hours"


def test_delete_province(repos):
    zones_repo, provinces_repo = repos
    zid = ZoneService(zones_repo, provinces_repo).create(name="North")
    provinces = ProvinceService(provinces_repo, zones_repo)
    pid = provinces.create(name="Alpha", zone_id=zid, work_start_time=7, work_end_time=22, operators=1)

    provinces.delete(pid)

    assert provinces.list_all() == []
    with pytest.raises(NotFoundError):
        provinces.delete(pid)


def test_working_hours_label():
    assert working_hours_label(Province(1, "Alpha", 1, 7, 22, 3)) == "7-22"
