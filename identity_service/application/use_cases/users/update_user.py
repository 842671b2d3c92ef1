# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from identity_service.domain.users.entities import User, UserPatch
from identity_service.domain.users.exceptions import UserNotFoundError
from identity_service.domain.users.repositories import PasswordHasher, UserDirectory


class UpdateUserUseCase:
    def __init__(
        self,
        *,
        users: UserDirectory,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self,
        user_id: int,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        current = self._users.find_by_id(user_id)
        if current is None:
            raise UserNotFoundError(user_id)

        password_hash = self._password_hasher.hash(password) if password is not None else None
        patch = UserPatch(name=name, email=email, password_hash=password_hash)
        if patch.is_empty():
            return current
        return self._users.update(user_id, patch)
