# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from identity_service.shared.logging import logger
from identity_service.shared.utils import client_ip

from .base import INTERNAL_ERROR_MESSAGE, AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        context = f" context={dict(exc.context)}" if exc.context and debug_mode else ""
        logger.warning(
            f"Handled application error {exc.code} ({int(exc.status)}) "
            f"on {request.method} {request.path}{context}"
        )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if exc.code is None or exc.code < 400:
            return exc
        response = jsonify({"message": exc.description or exc.name})
        return response, exc.code or default_status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {client_ip()}, user={user_id}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        response = jsonify({"message": INTERNAL_ERROR_MESSAGE})
        return response, default_status


__all__ = ["handle_app_error", "register_error_handler"]
