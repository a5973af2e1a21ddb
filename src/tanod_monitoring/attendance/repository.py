from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import AttendanceKind
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_owner(self, owner_id: str) -> Sequence[AttendanceRecord]:
        """All of the owner's records, newest first (store ordering on ties)."""

        raise NotImplementedError

    def append(
        self,
        *,
        owner_id: str,
        kind: AttendanceKind,
        occurred_at: datetime,
        location: str,
    ) -> int:
        raise NotImplementedError
