# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from identity_service.domain.users.exceptions import InvalidCredentialsError
from identity_service.domain.users.repositories import (
    PasswordHasher,
    TokenService,
    UserDirectory,
)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserDirectory,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> str:
        user = self._users.find_by_email(email)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        if not password_valid:
            raise InvalidCredentialsError()

        return self._tokens.issue(user.id, user.email)
