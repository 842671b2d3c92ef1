# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from identity_service.application.use_cases.users.login_user import LoginUserUseCase
from identity_service.application.use_cases.users.register_user import RegisterUserUseCase
from identity_service.domain.users.exceptions import InvalidCredentialsError
from identity_service.infrastructure.audit import AuditAction, audit_log
from identity_service.interfaces.http.dto.auth import (
    LoginRequestDTO,
    MessageDTO,
    RegisterRequestDTO,
    TokenDTO,
)
from identity_service.shared.errors.validation import raise_missing_fields
from identity_service.shared.logging import logger
from identity_service.shared.utils import client_ip


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_missing_fields(exc)

        user = self._register_use_case.execute(dto.name, dto.email, dto.password)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(),
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        payload = MessageDTO(message="User registered successfully!").model_dump()
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        ip_address = client_ip()

        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
            token = self._login_use_case.execute(dto.email, dto.password)
        except (ValidationError, InvalidCredentialsError) as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"reason": type(exc).__name__},
                success=False,
            )
            raise InvalidCredentialsError() from exc

        audit_log(AuditAction.LOGIN_SUCCESS, ip_address=ip_address, success=True)
        logger.info("auth.login: ok")
        return jsonify(TokenDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
