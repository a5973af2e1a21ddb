from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from ..core.constants import UNNAMED_LABEL
from ..identity.model import Profile
from ..reports.model import Report


@dataclass(frozen=True)
class AttributedReport:
    report: Report
    display_name: str


def display_name_for(owner_id: str, profiles: Mapping[str, Profile]) -> str:
    profile = profiles.get(owner_id)
    if profile is None:
        return owner_id
    return profile.display_name or UNNAMED_LABEL


def attribute_reports(reports: Iterable[Report], profiles: Mapping[str, Profile]) -> list[AttributedReport]:
    """Pair each report with its reporter's name, in the reports' order.

    Unknown owners fall back to the raw owner id.
    """

    return [AttributedReport(report=r, display_name=display_name_for(r.owner_id, profiles)) for r in reports]
