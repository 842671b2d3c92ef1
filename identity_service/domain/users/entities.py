# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    password_hash: str

    def to_profile(self) -> UserProfile:
        return UserProfile(id=self.id, name=self.name, email=self.email)


@dataclass(slots=True, frozen=True)
class UserProfile:
    """User record without credentials, safe to hand out."""

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(slots=True, frozen=True)
class UserPatch:
    """Fields to change on a user; ``None`` leaves the field untouched."""

    name: str | None = None
    email: str | None = None
    password_hash: str | None = None

    def is_empty(self) -> bool:
        return self.name is None and self.email is None and self.password_hash is None


@dataclass(slots=True, frozen=True)
class TokenClaim:

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


Identity = TokenClaim
