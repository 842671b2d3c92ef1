from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class RegisterRequestDTO(BaseModel):
    name: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")


class LoginRequestDTO(BaseModel):
    email: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")


class MessageDTO(BaseModel):
    message: str


class TokenDTO(BaseModel):
    token: str
