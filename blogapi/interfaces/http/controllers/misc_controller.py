# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from blogapi.domain.users.repositories import SessionStore
from blogapi.infrastructure.db import Database
from blogapi.shared.logging import logger


class MiscController:
    def __init__(self, *, database: Database, sessions: SessionStore) -> None:
        self._database = database
        self._sessions = sessions

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return "<h2>Hi There &#9995</h2>"

    def health(self):
        status: dict[str, object] = {"status": "success"}
        for name, probe in (("database", self._database.ping), ("sessions", self._sessions.ping)):
            try:
                healthy = probe()
            except Exception as exc:
                logger.warning(f"health: {name} probe failed: {type(exc).__name__}")
                healthy = False
            status[name] = "ok" if healthy else "error"
            if not healthy:
                status["status"] = "fail"
        return jsonify(status), 200 if status["status"] == "success" else 503
