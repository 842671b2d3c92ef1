# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from identity_service.domain.users.repositories import UserDirectory


class MiscController:
    def __init__(self, *, users: UserDirectory) -> None:
        self._users = users

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        return jsonify({"ok": True, "users": self._users.count()})
