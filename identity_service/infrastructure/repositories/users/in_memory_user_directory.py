# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import dataclasses
import itertools
from threading import Lock

from identity_service.domain.users.entities import User, UserPatch, UserProfile
from identity_service.domain.users.exceptions import (
    EmailAlreadyRegisteredError,
    EmailInUseError,
    UserNotFoundError,
)
from identity_service.domain.users.repositories import UserDirectory
from identity_service.shared.logging import logger


class InMemoryUserDirectory(UserDirectory):
    """Process-local user store.

    Records live in insertion order and are looked up by linear scan. Every
    operation holds ``self._lock`` for its whole duration, so the uniqueness
    check and the write that follows it cannot interleave with another
    request. Ids come from a counter that is never rewound, so an id freed
    by a deletion is not handed out again.
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._ids = itertools.count(1)
        self._lock = Lock()

    def register(self, name: str, email: str, password_hash: str) -> User:
        with self._lock:
            if self._index_by_email(email) is not None:
                raise EmailAlreadyRegisteredError()
            user = User(
                id=next(self._ids),
                name=name,
                email=email,
                password_hash=password_hash,
            )
            self._users.append(user)
        logger.info(f"directory.register: ok user_id={user.id}")
        return user

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            index = self._index_by_email(email)
            return None if index is None else self._users[index]

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            index = self._index_by_id(user_id)
            return None if index is None else self._users[index]

    def list_all(self) -> list[UserProfile]:
        with self._lock:
            return [user.to_profile() for user in self._users]

    def update(self, user_id: int, patch: UserPatch) -> User:
        with self._lock:
            index = self._index_by_id(user_id)
            if index is None:
                raise UserNotFoundError(user_id)

            current = self._users[index]
            if patch.email is not None and patch.email != current.email:
                holder = self._index_by_email(patch.email)
                if holder is not None and self._users[holder].id != user_id:
                    raise EmailInUseError()

            changes = {
                field: value
                for field, value in (
                    ("name", patch.name),
                    ("email", patch.email),
                    ("password_hash", patch.password_hash),
                )
                if value is not None
            }
            updated = dataclasses.replace(current, **changes)
            self._users[index] = updated
        logger.info(f"directory.update: ok user_id={user_id} fields={sorted(changes)}")
        return updated

    def delete(self, user_id: int) -> None:
        with self._lock:
            index = self._index_by_id(user_id)
            if index is None:
                raise UserNotFoundError(user_id)
            del self._users[index]
        logger.info(f"directory.delete: ok user_id={user_id}")

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    # Callers must hold self._lock.

    def _index_by_id(self, user_id: int) -> int | None:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def _index_by_email(self, email: str) -> int | None:
        for index, user in enumerate(self._users):
            if user.email == email:
                return index
        return None


__all__ = ["InMemoryUserDirectory"]
