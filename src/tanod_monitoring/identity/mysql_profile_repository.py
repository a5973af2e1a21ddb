from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_placeholders
from .model import Profile
from .repository import ProfileRepository


def _to_profile(r: dict) -> Profile:
    return Profile(
        uid=str(r["uid"]),
        display_name=r.get("display_name") or "",
        email=r.get("email") or "",
        role=Role.from_stored(r.get("role")),
        created_at=r["created_at"],
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, uid: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT uid, display_name, email, role, created_at
                FROM users
                WHERE uid=%s
                """,
                (uid,),
            )
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def create_if_absent(self, profile: Profile) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO users(uid, display_name, email, role, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (profile.uid, profile.display_name, profile.email, profile.role.value, profile.created_at),
            )
            return cur.rowcount > 0

    def get_many(self, uids: Iterable[str]) -> Mapping[str, Profile]:
        wanted = sorted({str(u) for u in uids})
        if not wanted:
            return {}

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT uid, display_name, email, role, created_at
                FROM users
                WHERE uid IN ({in_placeholders(wanted)})
                """,
                tuple(wanted),
            )
            return {p.uid: p for p in map(_to_profile, fetchall(cur))}

    def list_by_role(self, role: Role) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT uid, display_name, email, role, created_at
                FROM users
                WHERE role=%s
                ORDER BY display_name ASC
                """,
                (role.value,),
            )
            return [_to_profile(r) for r in fetchall(cur)]
