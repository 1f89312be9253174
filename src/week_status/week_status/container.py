from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceSource
from .core.constants import DEFAULT_FETCH_WORKERS, DEFAULT_WEEK_DAYS
from .core.enums import WeekStart
from .database.connection import DBConfig, DatabaseConnection
from .excuses.mysql_excuse_repository import MySQLExcuseSource
from .reconciliation.factory import DayRuleTable
from .schedules.mysql_schedule_repository import MySQLScheduleSource
from .week.service import WeekStatusService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    schedules_repo: MySQLScheduleSource
    attendance_repo: MySQLAttendanceSource
    excuses_repo: MySQLExcuseSource

    week_status_service: WeekStatusService


def build_container(
    *,
    db_config: dict,
    week_days: int = DEFAULT_WEEK_DAYS,
    week_starts_on: str = WeekStart.SUNDAY.value,
    fetch_workers: int = DEFAULT_FETCH_WORKERS,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    schedules_repo = MySQLScheduleSource(conn)
    attendance_repo = MySQLAttendanceSource(conn)
    excuses_repo = MySQLExcuseSource(conn)

    week_status_service = WeekStatusService(
        schedules_repo,
        attendance_repo,
        excuses_repo,
        week_days=int(week_days),
        starts_on=WeekStart(str(week_starts_on).lower()),
        max_workers=int(fetch_workers),
        rule_table=DayRuleTable(),
    )

    return Container(
        conn=conn,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        excuses_repo=excuses_repo,
        week_status_service=week_status_service,
    )
