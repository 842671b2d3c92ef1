# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping

from identity_service.domain.users.entities import Identity
from identity_service.domain.users.exceptions import (
    InvalidTokenError,
    MissingTokenError,
    NotSelfError,
)
from identity_service.domain.users.repositories import TokenService
from identity_service.shared.logging import logger

BEARER_PREFIX = "Bearer "


def extract_token(authorization: str | None) -> str | None:
    """Return the credential from an ``Authorization`` header value.

    The ``Bearer `` prefix is stripped when present; any other value is
    returned as is so that bare tokens are still accepted.
    """
    if not authorization:
        return None
    return authorization.removeprefix(BEARER_PREFIX)


class AuthGateway:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, headers: Mapping[str, str]) -> Identity:
        token = extract_token(headers.get("Authorization"))
        if token is None:
            raise MissingTokenError()

        claim = self._tokens.verify(token)
        if claim is None:
            raise InvalidTokenError()

        logger.debug(f"auth.gateway: token ok user={claim.user_id}")
        return claim

    def authorize_self_only(self, identity: Identity, target_user_id: int) -> None:
        if identity.user_id != target_user_id:
            logger.warning(
                f"auth.gateway: denied user={identity.user_id} target={target_user_id}"
            )
            raise NotSelfError(identity.user_id, target_user_id)
