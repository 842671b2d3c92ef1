# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from identity_service.application.services.auth_gateway import AuthGateway
from identity_service.application.services.password_hashing import WerkzeugPasswordHasher
from identity_service.application.services.tokens import JwtTokenService
from identity_service.application.use_cases.users.delete_user import DeleteUserUseCase
from identity_service.application.use_cases.users.list_users import ListUsersUseCase
from identity_service.application.use_cases.users.login_user import LoginUserUseCase
from identity_service.application.use_cases.users.register_user import RegisterUserUseCase
from identity_service.application.use_cases.users.update_user import UpdateUserUseCase
from identity_service.infrastructure.repositories.users.in_memory_user_directory import (
    InMemoryUserDirectory,
)
from identity_service.interfaces.http.controllers.auth_controller import AuthController
from identity_service.interfaces.http.controllers.misc_controller import MiscController
from identity_service.interfaces.http.controllers.users_controller import UsersController
from identity_service.shared.config import AppConfig


class Container:
    """Wires one application's collaborators; each app owns its own directory."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(self._config.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(self._config.secret_key or "")

    @cached_property
    def user_directory(self) -> InMemoryUserDirectory:
        return InMemoryUserDirectory()

    @cached_property
    def auth_gateway(self) -> AuthGateway:
        return AuthGateway(tokens=self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_directory,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_directory,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_directory)

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(
            users=self.user_directory,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(users=self.user_directory, gateway=self.auth_gateway)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            gateway=self.auth_gateway,
            list_use_case=self.list_users_use_case,
            update_use_case=self.update_user_use_case,
            delete_use_case=self.delete_user_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(users=self.user_directory)
