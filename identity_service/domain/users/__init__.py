# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Identity, TokenClaim, User, UserPatch, UserProfile
from .exceptions import (
    EmailAlreadyRegisteredError,
    EmailInUseError,
    EmailTakenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NotSelfError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenService, UserDirectory

__all__ = [
    "Identity",
    "TokenClaim",
    "User",
    "UserPatch",
    "UserProfile",
    "EmailAlreadyRegisteredError",
    "EmailInUseError",
    "EmailTakenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotSelfError",
    "UserNotFoundError",
    "PasswordHasher",
    "TokenService",
    "UserDirectory",
]
