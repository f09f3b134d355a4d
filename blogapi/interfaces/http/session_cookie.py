# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Request, Response
from itsdangerous import BadSignature, URLSafeSerializer

from blogapi.shared.config import SessionConfig
from blogapi.shared.logging import logger


class SessionCookie:
    """Carries the session id to the client in a signed, HttpOnly cookie."""

    def __init__(self, *, secret_key: str, config: SessionConfig, salt: str = "blogapi.session") -> None:
        self._serializer = URLSafeSerializer(secret_key, salt=salt)
        self._config = config

    def sign(self, session_id: str) -> str:
        return self._serializer.dumps(session_id)

    def issue(self, response: Response, session_id: str) -> None:
        response.set_cookie(
            self._config.cookie_name,
            self.sign(session_id),
            max_age=self._config.ttl_seconds,
            httponly=True,
            secure=self._config.cookie_secure,
            samesite=self._config.cookie_samesite,
        )

    def read(self, request: Request) -> str | None:
        raw = request.cookies.get(self._config.cookie_name)
        if not raw:
            return None
        try:
            value = self._serializer.loads(raw)
        except BadSignature:
            logger.warning(f"session cookie rejected: bad signature on {request.path}")
            return None
        return value if isinstance(value, str) and value else None

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            self._config.cookie_name,
            httponly=True,
            secure=self._config.cookie_secure,
            samesite=self._config.cookie_samesite,
        )
