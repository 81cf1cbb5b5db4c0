"""Stateless access tokens signed with HS256."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from storefront.domain.users.entities import Claims
from storefront.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenSignatureError,
    MalformedTokenError,
)
from storefront.domain.users.repositories import Clock, TokenService

TOKEN_LIFETIME = timedelta(hours=24)
ALGORITHM = "HS256"

# Expiry is checked against the injected clock, not PyJWT's wall clock.
_DECODE_OPTIONS: dict[str, Any] = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_iat": False,
    "verify_nbf": False,
    "require": ["sub", "iat", "exp"],
}


class JwtTokenService(TokenService):
    def __init__(self, *, secret: str, clock: Clock) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._clock = clock

    def issue(self, subject: str) -> str:
        issued_at = int(self._clock.now().timestamp())
        payload = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + int(TOKEN_LIFETIME.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Claims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options=_DECODE_OPTIONS,
            )
        except jwt.InvalidSignatureError as exc:
            raise InvalidTokenSignatureError() from exc
        except jwt.PyJWTError as exc:
            raise MalformedTokenError() from exc

        claims = self._claims_from(payload)
        if claims.is_expired(self._clock.now()):
            raise ExpiredTokenError()
        return claims

    @staticmethod
    def _claims_from(payload: dict[str, Any]) -> Claims:
        subject = payload.get("sub")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(subject, str):
            raise MalformedTokenError()
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise MalformedTokenError()
        try:
            return Claims(
                subject=subject,
                issued_at=datetime.fromtimestamp(issued_at, tz=UTC),
                expires_at=datetime.fromtimestamp(expires_at, tz=UTC),
            )
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedTokenError() from exc
