"""Signed bearer tokens.

Tokens are HS256 JWTs carrying the user id and e-mail plus ``iat``/``exp``.
Nothing is stored server side: a token is valid while its signature checks
out and it has not expired, so there is no revocation before expiry.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from identity_service.domain.users.entities import TokenClaim
from identity_service.domain.users.repositories import TokenService
from identity_service.shared.logging import logger

TOKEN_TTL = timedelta(hours=1)
ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        secret_key: str,
        *,
        ttl: timedelta = TOKEN_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key is required to sign tokens")
        self._secret_key = secret_key
        self._ttl = ttl
        self._clock = clock

    def issue(self, user_id: int, email: str) -> str:
        now = self._clock()
        payload = {
            "id": user_id,
            "email": email,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> TokenClaim | None:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                # exp is checked below against self._clock
                options={
                    "require": ["id", "email", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.verify: rejected ({type(exc).__name__})")
            return None

        user_id = payload["id"]
        email = payload["email"]
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            logger.debug("tokens.verify: rejected (bad claim types)")
            return None

        try:
            issued_at = datetime.fromtimestamp(payload["iat"], UTC)
            expires_at = datetime.fromtimestamp(payload["exp"], UTC)
        except (TypeError, ValueError, OverflowError, OSError):
            logger.debug("tokens.verify: rejected (bad timestamps)")
            return None

        if expires_at <= self._clock():
            logger.debug("tokens.verify: expired")
            return None

        return TokenClaim(
            user_id=user_id,
            email=email,
            issued_at=issued_at,
            expires_at=expires_at,
        )
