from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import AttendanceKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_owner(self, owner_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, uid, type, timestamp, location
                FROM attendance_logs
                WHERE uid=%s
                ORDER BY timestamp DESC
                """,
                (owner_id,),
            )
            return [
                AttendanceRecord(
                    record_id=int(r["id"]),
                    owner_id=str(r["uid"]),
                    kind=AttendanceKind(r["type"]),
                    occurred_at=r["timestamp"],
                    location=r.get("location") or "",
                )
                for r in fetchall(cur)
            ]

    def append(
        self,
        *,
        owner_id: str,
        kind: AttendanceKind,
        occurred_at: datetime,
        location: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_logs(uid, type, timestamp, location)
                VALUES(%s,%s,%s,%s)
                """,
                (owner_id, kind.value, occurred_at, location),
            )
            return int(cur.lastrowid)
