import pytest

from conftest import InMemoryProfiles, UnavailableStore, make_profile
from tanod_monitoring.core.enums import LandingRoute, Role
from tanod_monitoring.core.exceptions import AuthenticationError, StoreUnavailable
from tanod_monitoring.identity.model import Principal
from tanod_monitoring.identity.service import IdentityService


def test_new_principal_gets_tanod_profile_once(fixed_now):
    repo = InMemoryProfiles()
    svc = IdentityService(repo)
    principal = Principal(uid="fb-123", display_name="Maria Clara", email="maria@example.com")

    first = svc.resolve_landing(principal, now=fixed_now)
    second = svc.resolve_landing(principal, now=fixed_now)

    assert first.role is Role.TANOD
    assert first.route is LandingRoute.TANOD
    assert first.created is True
    assert second.route is LandingRoute.TANOD
    assert second.created is False
    assert len(repo.by_uid) == 1
    assert repo.create_calls == 1

    stored = repo.by_uid["fb-123"]
    assert stored.display_name == "Maria Clara"
    assert stored.email == "maria@example.com"
    assert stored.created_at == fixed_now


def test_principal_without_name_or_email_stores_blanks(fixed_now):
    repo = InMemoryProfiles()
    IdentityService(repo).resolve_landing(Principal(uid="fb-9"), now=fixed_now)

    assert repo.by_uid["fb-9"].display_name == ""
    assert repo.by_uid["fb-9"].email == ""


@pytest.mark.parametrize(
    "role, route",
    [
        (Role.ADMIN, LandingRoute.ADMIN),
        (Role.TANOD, LandingRoute.TANOD),
        (Role.PENDING, LandingRoute.PENDING),
    ],
)
def test_existing_profile_routes_by_role(role, route):
    repo = InMemoryProfiles([make_profile("u1", "User", role)])

    landing = IdentityService(repo).resolve_landing(Principal(uid="u1"))

    assert landing.role is role
    assert landing.route is route
    assert repo.create_calls == 0


def test_unrecognised_stored_role_reads_as_pending():
    assert Role.from_stored("volunteer") is Role.PENDING
    assert Role.from_stored(None) is Role.PENDING
    assert Role.from_stored("admin") is Role.ADMIN


def test_lost_creation_race_uses_stored_role(fixed_now):
    class RacingProfiles(InMemoryProfiles):
        def get_by_id(self, uid):
            # First lookup misses; another session creates an admin profile meanwhile.
            if self.create_calls == 0:
                self.by_uid.setdefault(uid, make_profile(uid, "Boss", Role.ADMIN))
                return None
            return super().get_by_id(uid)

        def create_if_absent(self, profile):
            self.create_calls += 1
            return False

    landing = IdentityService(RacingProfiles()).resolve_landing(Principal(uid="u7"), now=fixed_now)

    assert landing.role is Role.ADMIN
    assert landing.route is LandingRoute.ADMIN


def test_missing_principal_is_not_authenticated():
    svc = IdentityService(InMemoryProfiles())

    with pytest.raises(AuthenticationError):
        svc.resolve_landing(None)
    with pytest.raises(AuthenticationError):
        svc.resolve_landing(Principal(uid=""))


def test_store_failure_propagates():
    svc = IdentityService(UnavailableStore())

    with pytest.raises(StoreUnavailable):
        svc.resolve_landing(Principal(uid="u1"))
