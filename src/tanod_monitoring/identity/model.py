from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import LandingRoute, Role


@dataclass(frozen=True)
class Principal:
    """An identity issued by the external identity provider."""

    uid: str
    display_name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class Profile:
    """This system's own record about a Principal; carries the role.

    One per principal uid, never deleted here.
    """

    uid: str
    display_name: str
    email: str
    role: Role
    created_at: datetime


@dataclass(frozen=True)
class Landing:
    role: Role
    route: LandingRoute
    created: bool = False
