# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import wraps

from flask import g, request

from identity_service.application.services.auth_gateway import AuthGateway
from identity_service.domain.users.entities import Identity
from identity_service.shared.errors import AppError
from identity_service.shared.logging import logger


def current_identity() -> Identity:
    """Return the identity resolved by ``auth_required`` for this request."""
    return g.identity


def auth_required(gateway: AuthGateway):
    def decorator(f):
        @wraps(f)
        def inner(*a, **kw):
            try:
                identity = gateway.authenticate(request.headers)
            except AppError:
                logger.warning(
                    f"Auth failed on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise

            g.identity = identity
            g.user_id = identity.user_id
            logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator


__all__ = ["auth_required", "current_identity"]
