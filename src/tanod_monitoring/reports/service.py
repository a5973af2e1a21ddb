from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

import structlog

from ..common.datetime_utils import day_window, now_local, to_store_precision
from ..common.validators import require_non_empty, require_owner
from ..core.enums import Role, Severity
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Report
from .repository import ReportRepository

log = structlog.get_logger(__name__)


def _require_admin(viewer: Role) -> None:
    if viewer != Role.ADMIN:
        raise AuthorizationError("Only administrators can view all reports")


class ReportService:
    """Use cases over the append-only incident report log."""

    def __init__(self, reports: ReportRepository, *, allow_future: bool = True):
        self._reports = reports
        self._allow_future = bool(allow_future)

    def submit(
        self,
        owner_id: str,
        severity: Severity | str | None,
        body: str,
        location: str,
        occurred_at: Optional[datetime] = None,
        *,
        now: datetime | None = None,
    ) -> Report:
        """File a report; ``occurred_at`` defaults to submission time.

        A caller-supplied ``occurred_at`` is stored as given, truncated to
        millisecond precision like every stored timestamp. Future times are
        logged, and rejected only when the service was built with
        ``allow_future=False``.
        """

        owner_id = require_owner(owner_id)
        body = require_non_empty(body, "Report")
        location = require_non_empty(location, "Location")
        try:
            severity = Severity(severity or Severity.NORMAL)
        except ValueError:
            raise ValidationError(f"Unknown report type: {severity!r}")

        now = to_store_precision(now or now_local())
        if occurred_at is None:
            occurred_at = now
        else:
            occurred_at = to_store_precision(occurred_at)
        if occurred_at > now:
            if not self._allow_future:
                raise ValidationError("Report time cannot be in the future")
            log.warning("report_future_dated", owner_id=owner_id, occurred_at=occurred_at.isoformat())

        report_id = self._reports.append(
            owner_id=owner_id,
            severity=severity,
            body=body,
            location=location,
            occurred_at=occurred_at,
        )
        log.info("report_submitted", owner_id=owner_id, severity=severity.value, report_id=report_id)
        return Report(
            report_id=report_id,
            owner_id=owner_id,
            severity=severity,
            body=body,
            location=location,
            occurred_at=occurred_at,
        )

    def list_for_owner(self, owner_id: str) -> Sequence[Report]:
        return self._reports.list_for_owner(require_owner(owner_id))

    def list_for_window(self, start: date, end: date, *, viewer: Role) -> Sequence[Report]:
        _require_admin(viewer)
        lo, hi = day_window(start, end)
        return self._reports.list_between(lo, hi)

    def list_emergencies(self, *, viewer: Role) -> Sequence[Report]:
        _require_admin(viewer)
        return self._reports.list_by_severity(Severity.EMERGENCY)
