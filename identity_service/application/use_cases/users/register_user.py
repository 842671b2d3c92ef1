# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from identity_service.domain.users.entities import User
from identity_service.domain.users.exceptions import EmailAlreadyRegisteredError
from identity_service.domain.users.repositories import PasswordHasher, UserDirectory


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserDirectory,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> User:
        # directory.register re-checks under its lock
        if self._users.find_by_email(email) is not None:
            raise EmailAlreadyRegisteredError()
        hashed = self._password_hasher.hash(password)
        return self._users.register(name, email, hashed)
