from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Closed set of profile roles.

    The store keeps role as free text; anything that is not ``tanod`` or
    ``admin`` is read back as ``PENDING``.
    """

    TANOD = "tanod"
    ADMIN = "admin"
    PENDING = "pending"

    @classmethod
    def from_stored(cls, value: str | None) -> "Role":
        if value == cls.TANOD.value:
            return cls.TANOD
        if value == cls.ADMIN.value:
            return cls.ADMIN
        return cls.PENDING


class LandingRoute(str, Enum):
    """Where a signed-in principal is sent after profile setup."""

    TANOD = "/tanod-dashboard"
    ADMIN = "/admin-dashboard"
    PENDING = "/pending"


class AttendanceKind(str, Enum):
    IN = "in"
    OUT = "out"

    @property
    def opposite(self) -> "AttendanceKind":
        return AttendanceKind.OUT if self is AttendanceKind.IN else AttendanceKind.IN

    @property
    def label(self) -> str:
        return "Time In" if self is AttendanceKind.IN else "Time Out"


class AttendanceState(str, Enum):
    """Toggle state derived from an owner's newest attendance record."""

    NO_RECORD = "NO_RECORD"
    LAST_IN = "LAST_IN"
    LAST_OUT = "LAST_OUT"


class Severity(str, Enum):
    NORMAL = "normal"
    EMERGENCY = "emergency"
