from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping, Optional, Sequence

import pytest
from jose import jwt

from tanod_monitoring.attendance.model import AttendanceRecord
from tanod_monitoring.container import wire
from tanod_monitoring.core.enums import AttendanceKind, Role, Severity
from tanod_monitoring.core.exceptions import StoreUnavailable
from tanod_monitoring.identity.model import Profile
from tanod_monitoring.identity.token_verifier import IdTokenVerifier
from tanod_monitoring.main import create_app
from tanod_monitoring.reports.model import Report

TOKEN_KEY = "test-token-key"


class InMemoryProfiles:
    def __init__(self, profiles: Iterable[Profile] = ()):
        self.by_uid: dict[str, Profile] = {p.uid: p for p in profiles}
        self.create_calls = 0

    def get_by_id(self, uid: str) -> Optional[Profile]:
        return self.by_uid.get(uid)

    def create_if_absent(self, profile: Profile) -> bool:
        self.create_calls += 1
        if profile.uid in self.by_uid:
            return False
        self.by_uid[profile.uid] = profile
        return True

    def get_many(self, uids: Iterable[str]) -> Mapping[str, Profile]:
        return {u: self.by_uid[u] for u in set(uids) if u in self.by_uid}

    def list_by_role(self, role: Role) -> Sequence[Profile]:
        items = [p for p in self.by_uid.values() if p.role == role]
        return sorted(items, key=lambda p: p.display_name)


class InMemoryAttendance:
    def __init__(self):
        self.rows: list[AttendanceRecord] = []

    def list_for_owner(self, owner_id: str) -> Sequence[AttendanceRecord]:
        # Newest first; on equal timestamps the later insert wins, like an id tiebreak.
        mine = [r for r in reversed(self.rows) if r.owner_id == owner_id]
        return sorted(mine, key=lambda r: r.occurred_at, reverse=True)

    def append(self, *, owner_id: str, kind: AttendanceKind, occurred_at: datetime, location: str) -> int:
        rec = AttendanceRecord(
            record_id=len(self.rows) + 1,
            owner_id=owner_id,
            kind=kind,
            occurred_at=occurred_at,
            location=location,
        )
        self.rows.append(rec)
        return rec.record_id


class InMemoryReports:
    def __init__(self):
        self.rows: list[Report] = []

    def append(self, *, owner_id: str, severity: Severity, body: str, location: str, occurred_at: datetime) -> int:
        rep = Report(
            report_id=len(self.rows) + 1,
            owner_id=owner_id,
            severity=severity,
            body=body,
            location=location,
            occurred_at=occurred_at,
        )
        self.rows.append(rep)
        return rep.report_id

    def _newest_first(self, items) -> Sequence[Report]:
        return sorted(items, key=lambda r: r.occurred_at, reverse=True)

    def list_for_owner(self, owner_id: str) -> Sequence[Report]:
        return self._newest_first(r for r in self.rows if r.owner_id == owner_id)

    def list_between(self, start: datetime, end: datetime) -> Sequence[Report]:
        return self._newest_first(r for r in self.rows if start <= r.occurred_at <= end)

    def list_by_severity(self, severity: Severity) -> Sequence[Report]:
        return self._newest_first(r for r in self.rows if r.severity == severity)


class UnavailableStore:
    """Every repository call fails as if the database were down."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise StoreUnavailable("Database operation failed")

        return _fail


def make_profile(uid: str, name: str = "", role: Role = Role.TANOD, *, email: str = "") -> Profile:
    return Profile(uid=uid, display_name=name, email=email, role=role, created_at=datetime(2025, 8, 1, 9, 0, 0))


def make_token(uid: str, *, name: str | None = None, email: str | None = None, key: str = TOKEN_KEY) -> str:
    claims = {"sub": uid}
    if name:
        claims["name"] = name
    if email:
        claims["email"] = email
    return jwt.encode(claims, key, algorithm="HS256")


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 8, 12, 8, 25, 0)


@pytest.fixture
def profiles_repo() -> InMemoryProfiles:
    return InMemoryProfiles(
        [
            make_profile("admin-1", "Kapitan Reyes", Role.ADMIN),
            make_profile("tanod-1", "Juan Dela Cruz"),
            make_profile("tanod-2", "Andres Bonifacio"),
        ]
    )


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def reports_repo() -> InMemoryReports:
    return InMemoryReports()


@pytest.fixture
def container(profiles_repo, attendance_repo, reports_repo):
    return wire(
        profiles_repo=profiles_repo,
        attendance_repo=attendance_repo,
        reports_repo=reports_repo,
        token_verifier=IdTokenVerifier(TOKEN_KEY),
    )


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="tanod_monitoring.config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def sign_in(client, uid: str, role: Role | None = None, *, name: str = "") -> None:
    with client.session_transaction() as sess:
        sess["uid"] = uid
        sess["name"] = name
        sess["email"] = ""
        if role is not None:
            sess["role"] = role.value


@pytest.fixture
def as_tanod(client):
    sign_in(client, "tanod-1", Role.TANOD, name="Juan Dela Cruz")
    return client


@pytest.fixture
def as_admin(client):
    sign_in(client, "admin-1", Role.ADMIN, name="Kapitan Reyes")
    return client
