from __future__ import annotations

from datetime import datetime
from typing import Sequence

import structlog

from ..common.datetime_utils import now_local, to_store_precision
from ..common.validators import require_non_empty, require_owner
from ..core.constants import DISPLAY_DATETIME_FORMAT
from ..core.enums import AttendanceKind
from ..core.exceptions import ValidationError
from .ledger import next_allowed_action, state_of, transition
from .model import AttendanceRecord
from .repository import AttendanceRepository

log = structlog.get_logger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def history(self, owner_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_owner(require_owner(owner_id))

    def next_action(self, owner_id: str) -> AttendanceKind:
        return next_allowed_action(self.history(owner_id))

    def record(
        self,
        owner_id: str,
        kind: AttendanceKind | str,
        location: str,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        owner_id = require_owner(owner_id)
        location = require_non_empty(location, "Location")
        try:
            kind = AttendanceKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown attendance action: {kind!r}")

        # Read-then-write without a lock; two devices racing can both pass.
        history = self._attendance.list_for_owner(owner_id)
        transition(state_of(history), kind)

        now = to_store_precision(now or now_local())
        record_id = self._attendance.append(owner_id=owner_id, kind=kind, occurred_at=now, location=location)
        log.info("attendance_recorded", owner_id=owner_id, kind=kind.value, record_id=record_id)

        for rec in self._attendance.list_for_owner(owner_id):
            if rec.record_id == record_id:
                return rec
        return AttendanceRecord(record_id=record_id, owner_id=owner_id, kind=kind, occurred_at=now, location=location)

    @staticmethod
    def to_ui(r: AttendanceRecord) -> dict:
        return {
            "label": r.kind.label,
            "kind": r.kind.value,
            "occurred_at": r.occurred_at.strftime(DISPLAY_DATETIME_FORMAT),
            "location": r.location,
            "css_class": "bg-success" if r.kind is AttendanceKind.IN else "bg-danger",
        }
