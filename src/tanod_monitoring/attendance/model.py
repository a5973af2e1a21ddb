from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AttendanceKind


@dataclass(frozen=True)
class AttendanceRecord:
    """One time-in or time-out event in an owner's ledger."""

    record_id: int
    owner_id: str
    kind: AttendanceKind
    occurred_at: datetime
    location: str
