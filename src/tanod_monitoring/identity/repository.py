from __future__ import annotations

from typing import Iterable, Mapping, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Profile


class ProfileRepository(Protocol):
    """Repository interface for Profile.

    The service layer depends on this interface, never on a concrete store.
    """

    def get_by_id(self, uid: str) -> Optional[Profile]:
        raise NotImplementedError

    def create_if_absent(self, profile: Profile) -> bool:
        """Insert ``profile`` unless one already exists for its uid.

        Returns True when a row was written.
        """

        raise NotImplementedError

    def get_many(self, uids: Iterable[str]) -> Mapping[str, Profile]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Profile]:
        """Profiles with ``role`` ordered by display name."""

        raise NotImplementedError
