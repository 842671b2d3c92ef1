"""Use-case for users deleting their own record."""

from __future__ import annotations

from identity_service.application.services.auth_gateway import AuthGateway
from identity_service.domain.users.entities import Identity
from identity_service.domain.users.repositories import UserDirectory


class DeleteUserUseCase:
    def __init__(self, *, users: UserDirectory, gateway: AuthGateway) -> None:
        self._users = users
        self._gateway = gateway

    def execute(self, identity: Identity, user_id: int) -> None:
        self._gateway.authorize_self_only(identity, user_id)
        self._users.delete(user_id)
