# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from identity_service.application.services.auth_gateway import AuthGateway
from identity_service.application.use_cases.users.delete_user import DeleteUserUseCase
from identity_service.application.use_cases.users.list_users import ListUsersUseCase
from identity_service.application.use_cases.users.update_user import UpdateUserUseCase
from identity_service.domain.users.exceptions import NotSelfError
from identity_service.infrastructure.audit import AuditAction, audit_log
from identity_service.infrastructure.auth import auth_required, current_identity
from identity_service.interfaces.http.dto.auth import MessageDTO
from identity_service.interfaces.http.dto.users import (
    UpdateUserRequestDTO,
    UserDTO,
    UserUpdatedDTO,
)
from identity_service.shared.errors import InvalidUserIdError, ValidationError
from identity_service.shared.errors.validation import format_pydantic_errors
from identity_service.shared.logging import logger
from identity_service.shared.utils import client_ip

_USER_ID_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_user_id(raw: str) -> int:
    if not _USER_ID_RE.fullmatch(raw):
        raise InvalidUserIdError(raw)
    try:
        return int(raw)
    except ValueError as exc:
        # past the interpreter's int-from-str digit limit
        raise InvalidUserIdError(raw[:32]) from exc


class UsersController:
    def __init__(
        self,
        *,
        gateway: AuthGateway,
        list_use_case: ListUsersUseCase,
        update_use_case: UpdateUserUseCase,
        delete_use_case: DeleteUserUseCase,
    ) -> None:
        self._gateway = gateway
        self._list_use_case = list_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    def list_users(self) -> tuple[Response, int]:
        users = self._list_use_case.execute()
        return jsonify([user.to_dict() for user in users]), 200

    def update_user(self, user_id: str) -> tuple[Response, int]:
        target_id = parse_user_id(user_id)

        try:
            dto = UpdateUserRequestDTO.model_validate(request.get_json(silent=True) or {})
        except PydanticValidationError as exc:
            raise ValidationError(
                "invalid_user_update",
                message="Name, email, and password must be strings.",
                context=format_pydantic_errors(exc),
            ) from exc

        user = self._update_use_case.execute(
            target_id,
            name=dto.name,
            email=dto.email,
            password=dto.password,
        )

        changed = [
            field for field in ("name", "email", "password") if getattr(dto, field) is not None
        ]
        audit_log(
            AuditAction.USER_UPDATED,
            user_id=current_identity().user_id,
            ip_address=client_ip(),
            details={"target_id": target_id, "fields": changed},
            success=True,
        )

        payload = UserUpdatedDTO(
            message=f"User with ID {target_id} updated successfully.",
            user=UserDTO(id=user.id, name=user.name, email=user.email),
        )
        return jsonify(payload.model_dump()), 200

    def delete_user(self, user_id: str) -> tuple[Response, int]:
        target_id = parse_user_id(user_id)
        identity = current_identity()

        try:
            self._delete_use_case.execute(identity, target_id)
        except NotSelfError:
            audit_log(
                AuditAction.USER_DELETE_DENIED,
                user_id=identity.user_id,
                ip_address=client_ip(),
                details={"target_id": target_id},
                success=False,
            )
            raise

        audit_log(
            AuditAction.USER_DELETED,
            user_id=identity.user_id,
            ip_address=client_ip(),
            success=True,
        )
        logger.info(f"users.delete: ok user_id={target_id}")
        payload = MessageDTO(message=f"User with ID {target_id} deleted successfully.")
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        protect = auth_required(self._gateway)
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("", view_func=protect(self.list_users), methods=["GET"])
        bp.add_url_rule(
            "/<user_id>",
            view_func=protect(self.update_user),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/<user_id>",
            view_func=protect(self.delete_user),
            methods=["DELETE"],
        )
        return bp
