"""Use-case for listing users without their credentials."""

from __future__ import annotations

from identity_service.domain.users.entities import UserProfile
from identity_service.domain.users.repositories import UserDirectory


class ListUsersUseCase:
    def __init__(self, *, users: UserDirectory) -> None:
        self._users = users

    def execute(self) -> list[UserProfile]:
        return self._users.list_all()
