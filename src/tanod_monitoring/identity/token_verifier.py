from __future__ import annotations

from typing import Optional, Sequence

import structlog
from jose import JWTError, jwt

from ..core.exceptions import AuthenticationError
from .model import Principal

log = structlog.get_logger(__name__)


class IdTokenVerifier:
    """Verify ID tokens issued by the federated identity provider.

    The provider's browser SDK handles the sign-in popup (or redirect
    fallback) and hands us a signed token; we only check it and read the
    principal's claims.
    """

    def __init__(
        self,
        key: str,
        *,
        algorithms: Sequence[str] = ("HS256",),
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        self._key = key
        self._algorithms = list(algorithms)
        self._audience = audience
        self._issuer = issuer

    def verify(self, token: str) -> Principal:
        token = (token or "").strip()
        if not token:
            raise AuthenticationError("Missing ID token")
        if not self._key:
            raise AuthenticationError("Identity provider is not configured")

        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=self._algorithms,
                audience=self._audience,
                issuer=self._issuer,
                options={"verify_aud": self._audience is not None},
            )
        except JWTError as e:
            log.warning("login_rejected", reason=str(e))
            raise AuthenticationError("Could not validate credentials") from e

        uid = claims.get("sub") or claims.get("user_id")
        if not uid:
            log.warning("login_rejected", reason="token has no subject")
            raise AuthenticationError("Could not validate credentials")

        return Principal(
            uid=str(uid),
            display_name=claims.get("name") or None,
            email=claims.get("email") or None,
        )
