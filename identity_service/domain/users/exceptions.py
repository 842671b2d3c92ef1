# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from identity_service.shared.errors.base import DomainError


class EmailTakenError(DomainError):
    code = "email_taken"
    message = "Email already registered."


class EmailAlreadyRegisteredError(EmailTakenError):
    code = "email_already_registered"


class EmailInUseError(EmailTakenError):
    code = "email_in_use"
    message = "Email already in use by another user."


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, user_id: int) -> None:
        super().__init__(
            message=f"User with ID {user_id} not found.",
            context={"user_id": user_id},
        )


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid email or password."


class MissingTokenError(DomainError):
    code = "token_missing"
    status = HTTPStatus.UNAUTHORIZED
    message = "Access denied. No token provided."


class InvalidTokenError(DomainError):
    code = "token_invalid"
    status = HTTPStatus.FORBIDDEN
    message = "Invalid or expired token."


class NotSelfError(DomainError):
    code = "not_self"
    status = HTTPStatus.FORBIDDEN
    message = "You are not authorized to delete this user."

    def __init__(self, caller_id: int, target_id: int) -> None:
        super().__init__(context={"caller_id": caller_id, "target_id": target_id})
