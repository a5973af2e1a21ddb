from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import Severity
from .model import Report


class ReportRepository(Protocol):
    def append(
        self,
        *,
        owner_id: str,
        severity: Severity,
        body: str,
        location: str,
        occurred_at: datetime,
    ) -> int:
        raise NotImplementedError

    def list_for_owner(self, owner_id: str) -> Sequence[Report]:
        raise NotImplementedError

    def list_between(self, start: datetime, end: datetime) -> Sequence[Report]:
        """Reports with ``start <= occurred_at <= end``, newest first."""

        raise NotImplementedError

    def list_by_severity(self, severity: Severity) -> Sequence[Report]:
        raise NotImplementedError
