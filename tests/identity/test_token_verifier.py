import pytest
from jose import jwt

from conftest import TOKEN_KEY, make_token
from tanod_monitoring.core.exceptions import AuthenticationError
from tanod_monitoring.identity.token_verifier import IdTokenVerifier


def test_valid_token_yields_principal():
    verifier = IdTokenVerifier(TOKEN_KEY)

    principal = verifier.verify(make_token("fb-1", name="Juan", email="juan@example.com"))

    assert principal.uid == "fb-1"
    assert principal.display_name == "Juan"
    assert principal.email == "juan@example.com"


def test_user_id_claim_is_accepted_when_sub_missing():
    token = jwt.encode({"user_id": "fb-2"}, TOKEN_KEY, algorithm="HS256")

    assert IdTokenVerifier(TOKEN_KEY).verify(token).uid == "fb-2"


def test_optional_claims_default_to_none():
    principal = IdTokenVerifier(TOKEN_KEY).verify(make_token("fb-3"))

    assert principal.display_name is None
    assert principal.email is None


@pytest.mark.parametrize("token", ["", "   ", "not-a-jwt"])
def test_malformed_tokens_are_rejected(token):
    with pytest.raises(AuthenticationError):
        IdTokenVerifier(TOKEN_KEY).verify(token)


def test_wrong_signature_is_rejected():
    with pytest.raises(AuthenticationError):
        IdTokenVerifier(TOKEN_KEY).verify(make_token("fb-1", key="someone-else"))


def test_token_without_subject_is_rejected():
    token = jwt.encode({"name": "Nobody"}, TOKEN_KEY, algorithm="HS256")

    with pytest.raises(AuthenticationError):
        IdTokenVerifier(TOKEN_KEY).verify(token)


def test_audience_is_checked_when_configured():
    token = jwt.encode({"sub": "fb-1", "aud": "other-app"}, TOKEN_KEY, algorithm="HS256")

    with pytest.raises(AuthenticationError):
        IdTokenVerifier(TOKEN_KEY, audience="tanod-app").verify(token)

    good = jwt.encode({"sub": "fb-1", "aud": "tanod-app"}, TOKEN_KEY, algorithm="HS256")
    assert IdTokenVerifier(TOKEN_KEY, audience="tanod-app").verify(good).uid == "fb-1"


def test_unconfigured_key_rejects_everything():
    with pytest.raises(AuthenticationError):
        IdTokenVerifier("").verify(make_token("fb-1"))
