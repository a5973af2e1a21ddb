from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.constants import UNKNOWN_LOCATION
from ..core.enums import Severity
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Report
from .repository import ReportRepository

_COLUMNS = "id, uid, content, log_type, location, timestamp"


def _to_report(r: dict) -> Report:
    return Report(
        report_id=int(r["id"]),
        owner_id=str(r["uid"]),
        severity=Severity(r.get("log_type") or Severity.NORMAL.value),
        body=r.get("content") or "",
        location=r.get("location") or UNKNOWN_LOCATION,
        occurred_at=r["timestamp"],
    )


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(
        self,
        *,
        owner_id: str,
        severity: Severity,
        body: str,
        location: str,
        occurred_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO event_reports(uid, content, log_type, location, timestamp)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (owner_id, body, severity.value, location, occurred_at),
            )
            return int(cur.lastrowid)

    def _select(self, where: str, params: tuple) -> Sequence[Report]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM event_reports
                WHERE {where}
                ORDER BY timestamp DESC
                """,
                params,
            )
            return [_to_report(r) for r in fetchall(cur)]

    def list_for_owner(self, owner_id: str) -> Sequence[Report]:
        return self._select("uid=%s", (owner_id,))

    def list_between(self, start: datetime, end: datetime) -> Sequence[Report]:
        return self._select("timestamp >= %s AND timestamp <= %s", (start, end))

    def list_by_severity(self, severity: Severity) -> Sequence[Report]:
        return self._select("log_type=%s", (severity.value,))
