from __future__ import annotations

from datetime import datetime
from typing import Optional

import structlog

from ..common.datetime_utils import now_local, to_store_precision
from ..core.enums import LandingRoute, Role
from ..core.exceptions import AuthenticationError
from .model import Landing, Principal, Profile
from .repository import ProfileRepository

log = structlog.get_logger(__name__)

_ROUTES = {
    Role.ADMIN: LandingRoute.ADMIN,
    Role.TANOD: LandingRoute.TANOD,
    Role.PENDING: LandingRoute.PENDING,
}


def landing_for(role: Role) -> LandingRoute:
    return _ROUTES.get(role, LandingRoute.PENDING)


class IdentityService:
    """Use case: map a signed-in principal to a role and landing page."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def resolve_landing(self, principal: Optional[Principal], *, now: datetime | None = None) -> Landing:
        """Look up (or lazily create) the principal's profile and pick a route.

        A missing profile is created with role ``tanod``. Creation is an
        insert-if-absent, so retrying after a partial failure never produces
        a second profile. Store errors propagate to the caller.
        """

        if principal is None or not principal.uid:
            raise AuthenticationError("Not authenticated")

        profile = self._profiles.get_by_id(principal.uid)
        if profile is not None:
            return Landing(role=profile.role, route=landing_for(profile.role))

        profile = Profile(
            uid=principal.uid,
            display_name=principal.display_name or "",
            email=principal.email or "",
            role=Role.TANOD,
            created_at=to_store_precision(now or now_local()),
        )
        created = self._profiles.create_if_absent(profile)
        if created:
            log.info("profile_created", uid=principal.uid, role=Role.TANOD.value)
            return Landing(role=Role.TANOD, route=LandingRoute.TANOD, created=True)

        # Lost a race with another session; honour whatever was stored.
        stored = self._profiles.get_by_id(principal.uid)
        role = stored.role if stored else Role.TANOD
        return Landing(role=role, route=landing_for(role))

    def get_profile(self, uid: str) -> Optional[Profile]:
        return self._profiles.get_by_id(uid)
