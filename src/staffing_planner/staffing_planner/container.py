from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .call_volumes.mysql_call_volume_repository import MySQLCallVolumeRepository
from .call_volumes.service import CallVolumeService
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .distribution.mysql_distribution_repository import MySQLDistributionRepository
from .distribution.service import PlanningService
from .distribution.store import PlanStore
from .parameters.model import SystemParameters
from .parameters.mysql_parameter_repository import MySQLParameterRepository
from .parameters.service import ParameterService
from .users.mysql_admin_repository import MySQLAdminRepository
from .users.service import AuthService
from .zones.mysql_province_repository import MySQLProvinceRepository
from .zones.mysql_zone_repository import MySQLZoneRepository
from .zones.service import ProvinceService, ZoneService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    admins_repo: MySQLAdminRepository
    zones_repo: MySQLZoneRepository
    provinces_repo: MySQLProvinceRepository
    call_volumes_repo: MySQLCallVolumeRepository
    parameters_repo: MySQLParameterRepository
    distributions_repo: MySQLDistributionRepository

    auth_service: AuthService
    zone_service: ZoneService
    province_service: ProvinceService
    call_volume_service: CallVolumeService
    parameter_service: ParameterService
    planning_service: PlanningService
    dashboard_service: DashboardService

    plan_store: PlanStore


def build_container(*, db_config: dict, default_parameters: Optional[SystemParameters] = None) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    admins_repo = MySQLAdminRepository(conn)
    zones_repo = MySQLZoneRepository(conn)
    provinces_repo = MySQLProvinceRepository(conn)
    call_volumes_repo = MySQLCallVolumeRepository(conn)
    parameters_repo = MySQLParameterRepository(conn)
    distributions_repo = MySQLDistributionRepository(conn)

    auth_service = AuthService(admins_repo)
    zone_service = ZoneService(zones_repo, provinces_repo)
    province_service = ProvinceService(provinces_repo, zones_repo)
    call_volume_service = CallVolumeService(call_volumes_repo)
    parameter_service = ParameterService(parameters_repo, defaults=default_parameters)
    planning_service = PlanningService(zone_service, call_volume_service, parameter_service, distributions_repo)
    dashboard_service = DashboardService(zone_service, parameter_service)

    return Container(
        conn=conn,
        admins_repo=admins_repo,
        zones_repo=zones_repo,
        provinces_repo=provinces_repo,
        call_volumes_repo=call_volumes_repo,
        parameters_repo=parameters_repo,
        distributions_repo=distributions_repo,
        auth_service=auth_service,
        zone_service=zone_service,
        province_service=province_service,
        call_volume_service=call_volume_service,
        parameter_service=parameter_service,
        planning_service=planning_service,
        dashboard_service=dashboard_service,
        plan_store=PlanStore(),
    )
