# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import request


def client_ip() -> str:
    """Address of the peer that sent the request.

    Forwarding headers are not read here. When ``TRUST_PROXY`` is enabled the
    app is wrapped in werkzeug's ``ProxyFix``, which has already rewritten
    ``remote_addr`` from the proxy's ``X-Forwarded-For`` hop.
    """
    return request.remote_addr or "unknown"


__all__ = ["client_ip"]
