# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
from typing import Any

from blogapi.domain.users.entities import SessionData, SessionUser
from blogapi.shared.logging import logger


def dump_session(data: SessionData) -> str:
    payload: dict[str, Any] = {}
    if data.user is not None:
        payload["user"] = {"id": data.user.id, "username": data.user.username}
    return json.dumps(payload, separators=(",", ":"))


def load_session(raw: str | bytes) -> SessionData | None:
    """Decode a stored payload; ``None`` when it cannot be read at all."""
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("sessions: unreadable payload, treating as missing")
        return None
    if not isinstance(payload, dict):
        logger.warning("sessions: payload is not an object, treating as missing")
        return None

    user = payload.get("user")
    if not isinstance(user, dict):
        return SessionData(user=None)
    try:
        return SessionData(user=SessionUser(id=int(user["id"]), username=str(user["username"])))
    except (KeyError, TypeError, ValueError):
        logger.warning("sessions: payload user is incomplete")
        return SessionData(user=None)


__all__ = ["dump_session", "load_session"]
