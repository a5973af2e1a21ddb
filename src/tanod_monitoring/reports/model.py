from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Severity


@dataclass(frozen=True)
class Report:
    """Incident report filed by a tanod."""

    report_id: int
    owner_id: str
    severity: Severity
    body: str
    location: str
    occurred_at: datetime

    @property
    def is_emergency(self) -> bool:
        return self.severity is Severity.EMERGENCY
