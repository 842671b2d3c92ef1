# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response

from identity_service.shared.config import SecurityConfig


def configure_security_headers(app: Flask, security: SecurityConfig) -> None:

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("X-DNS-Prefetch-Control", "off")

        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp


__all__ = ["configure_security_headers"]
