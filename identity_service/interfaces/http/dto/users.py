from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class UpdateUserRequestDTO(BaseModel):
    name: StrictStr | None = None
    email: StrictStr | None = None
    password: StrictStr | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def _empty_as_absent(cls, value: Any) -> Any:
        # Only non-empty strings count as a change.
        if isinstance(value, str) and not value:
            return None
        return value


class UserDTO(BaseModel):
    id: int
    name: str
    email: str


class UserUpdatedDTO(BaseModel):
    message: str
    user: UserDTO
