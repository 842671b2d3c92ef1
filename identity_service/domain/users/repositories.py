# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaim, User, UserPatch, UserProfile


class UserDirectory(Protocol):
    def register(self, name: str, email: str, password_hash: str) -> User: ...
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def list_all(self) -> list[UserProfile]: ...
    def update(self, user_id: int, patch: UserPatch) -> User: ...
    def delete(self, user_id: int) -> None: ...
    def count(self) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, user_id: int, email: str) -> str: ...
    def verify(self, token: str) -> TokenClaim | None: ...
