# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast

INTERNAL_ERROR_MESSAGE = "Something went wrong!"


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = ""
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message or self.code}


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str, getattr(self, "message", ""))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        message: str = "Invalid request.",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class MissingFieldsError(ValidationError):
    def __init__(self, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            "missing_fields",
            message="Name, email, and password are required.",
            context=context,
        )


class InvalidUserIdError(ValidationError):
    def __init__(self, raw_id: str) -> None:
        super().__init__(
            "invalid_user_id",
            message="Invalid user ID",
            context={"user_id": raw_id},
        )


class RateLimitedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
            message="Too many requests from this IP, please try again later.",
        )
