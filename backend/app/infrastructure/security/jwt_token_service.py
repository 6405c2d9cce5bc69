"""PyJWT-backed implementation of the TokenService port."""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from app.application.interfaces import TokenService
from app.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class JWTTokenService(TokenService):
    """Issues and verifies signed HS256 access tokens.

    Tokens carry the username in ``sub``, the configured issuer in ``iss``,
    and an ``exp`` claim ``expire_minutes`` after issuing.
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ) -> None:
        self._secret_key = secret_key
        self._issuer = issuer
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def issue(self, subject: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iss": self._issuer,
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.debug("Rejected access token: %s", exc)
            raise AuthenticationError("Invalid token") from exc
        return payload["sub"]
