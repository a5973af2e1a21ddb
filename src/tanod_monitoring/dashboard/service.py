from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.constants import DISPLAY_DATETIME_FORMAT, UNNAMED_LABEL
from ..core.enums import Role
from ..identity.repository import ProfileRepository
from ..reports.model import Report
from ..reports.service import ReportService
from .aggregator import AttributedReport, attribute_reports


@dataclass(frozen=True)
class TanodEntry:
    uid: str
    name: str


class DashboardService:
    """Admin read-models: emergency feed, report window, tanod roster."""

    def __init__(self, reports: ReportService, profiles: ProfileRepository, attendance: AttendanceRepository):
        self._reports = reports
        self._profiles = profiles
        self._attendance = attendance

    def _attribute(self, reports: Sequence[Report]) -> list[AttributedReport]:
        profiles = self._profiles.get_many(r.owner_id for r in reports)
        return attribute_reports(reports, profiles)

    def emergency_feed(self, *, viewer: Role) -> list[AttributedReport]:
        return self._attribute(self._reports.list_emergencies(viewer=viewer))

    def reports_for_window(self, start: date, end: date, *, viewer: Role) -> list[AttributedReport]:
        return self._attribute(self._reports.list_for_window(start, end, viewer=viewer))

    def tanod_roster(self) -> list[TanodEntry]:
        return [TanodEntry(uid=p.uid, name=p.display_name or UNNAMED_LABEL) for p in self._profiles.list_by_role(Role.TANOD)]

    def tanod_attendance(self, owner_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_owner(owner_id)

    @staticmethod
    def to_csv_rows(items: Sequence[AttributedReport]) -> list[dict]:
        return [
            {
                "occurred_at": a.report.occurred_at.strftime(DISPLAY_DATETIME_FORMAT),
                "severity": a.report.severity.value,
                "reporter": a.display_name,
                "owner_id": a.report.owner_id,
                "location": a.report.location,
                "body": a.report.body,
            }
            for a in items
        ]

