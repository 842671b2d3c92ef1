# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from identity_service.shared.errors.base import DomainError

from .users import Identity, TokenClaim, User, UserPatch, UserProfile

__all__ = [
    "DomainError",
    "Identity",
    "TokenClaim",
    "User",
    "UserPatch",
    "UserProfile",
]
