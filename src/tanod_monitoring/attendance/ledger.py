"""Time-in/time-out toggle rule.

Pure functions over an owner's records ordered newest first::

    NO_RECORD --in--> LAST_IN --out--> LAST_OUT --in--> LAST_IN

Every other (state, kind) pair is rejected. There is no terminal state.
"""

from __future__ import annotations

from typing import Sequence

from ..core.enums import AttendanceKind, AttendanceState
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

_TRANSITIONS = {
    (AttendanceState.NO_RECORD, AttendanceKind.IN): AttendanceState.LAST_IN,
    (AttendanceState.LAST_IN, AttendanceKind.OUT): AttendanceState.LAST_OUT,
    (AttendanceState.LAST_OUT, AttendanceKind.IN): AttendanceState.LAST_IN,
}


def state_of(records: Sequence[AttendanceRecord]) -> AttendanceState:
    if not records:
        return AttendanceState.NO_RECORD
    if records[0].kind is AttendanceKind.IN:
        return AttendanceState.LAST_IN
    return AttendanceState.LAST_OUT


def next_allowed_action(records: Sequence[AttendanceRecord]) -> AttendanceKind:
    if not records:
        return AttendanceKind.IN
    return records[0].kind.opposite


def transition(state: AttendanceState, kind: AttendanceKind) -> AttendanceState:
    try:
        return _TRANSITIONS[(state, kind)]
    except KeyError:
        if kind is AttendanceKind.IN:
            raise ValidationError("You are already timed in; time out first")
        raise ValidationError("You are not timed in; time in first")
