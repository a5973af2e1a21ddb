from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .identity.mysql_profile_repository import MySQLProfileRepository
from .identity.repository import ProfileRepository
from .identity.service import IdentityService
from .identity.token_verifier import IdTokenVerifier
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    profiles_repo: ProfileRepository
    attendance_repo: AttendanceRepository
    reports_repo: ReportRepository

    token_verifier: IdTokenVerifier
    identity_service: IdentityService
    attendance_service: AttendanceService
    report_service: ReportService
    dashboard_service: DashboardService


def wire(
    *,
    profiles_repo: ProfileRepository,
    attendance_repo: AttendanceRepository,
    reports_repo: ReportRepository,
    token_verifier: IdTokenVerifier,
    allow_future_reports: bool = True,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    report_service = ReportService(reports_repo, allow_future=allow_future_reports)
    return Container(
        conn=conn,
        profiles_repo=profiles_repo,
        attendance_repo=attendance_repo,
        reports_repo=reports_repo,
        token_verifier=token_verifier,
        identity_service=IdentityService(profiles_repo),
        attendance_service=AttendanceService(attendance_repo),
        report_service=report_service,
        dashboard_service=DashboardService(report_service, profiles_repo, attendance_repo),
    )


def build_container(*, db_config: dict, settings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    token_verifier = IdTokenVerifier(
        str(getattr(settings, "AUTH_TOKEN_KEY", "")),
        algorithms=getattr(settings, "AUTH_TOKEN_ALGORITHMS", ["HS256"]),
        audience=getattr(settings, "AUTH_TOKEN_AUDIENCE", None),
        issuer=getattr(settings, "AUTH_TOKEN_ISSUER", None),
    )

    return wire(
        profiles_repo=MySQLProfileRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        reports_repo=MySQLReportRepository(conn),
        token_verifier=token_verifier,
        allow_future_reports=bool(getattr(settings, "ALLOW_FUTURE_REPORTS", True)),
        conn=conn,
    )
