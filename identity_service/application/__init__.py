# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import AuthGateway, JwtTokenService, WerkzeugPasswordHasher
from .use_cases.users import (
    DeleteUserUseCase,
    ListUsersUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)

__all__ = [
    "AuthGateway",
    "JwtTokenService",
    "WerkzeugPasswordHasher",
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateUserUseCase",
]
