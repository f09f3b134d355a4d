# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import NoReturn

from redis import ConnectionError as RedisConnectionError
from redis import Redis, RedisError

from blogapi.domain.users.entities import SessionData
from blogapi.domain.users.exceptions import SessionStoreError
from blogapi.domain.users.repositories import SessionStore
from blogapi.shared.logging import logger

from .serialization import dump_session, load_session


class RedisSessionStore(SessionStore):
    """Sessions as ``SET <prefix><id> <json> EX <ttl>``; expiry is left to Redis."""

    def __init__(self, client: Redis, *, key_prefix: str = "sess:") -> None:
        self._client = client
        self._prefix = key_prefix

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    def _handle_redis_error(self, operation: str, error: Exception) -> NoReturn:
        if isinstance(error, RedisConnectionError):
            logger.error(f"sessions.redis: connection failed during {operation}: {error}")
        else:
            logger.error(f"sessions.redis: {type(error).__name__} during {operation}: {error}")
        raise SessionStoreError(operation) from error

    def create(self, session_id: str, data: SessionData, ttl_seconds: int) -> None:
        try:
            self._client.set(self._key(session_id), dump_session(data), ex=ttl_seconds)
        except RedisError as exc:
            self._handle_redis_error("create", exc)
        logger.debug(f"sessions.redis: stored ttl={ttl_seconds}s")

    def get(self, session_id: str) -> SessionData | None:
        try:
            raw = self._client.get(self._key(session_id))
        except RedisError as exc:
            self._handle_redis_error("read", exc)
        if raw is None:
            return None
        return load_session(raw)

    def destroy(self, session_id: str) -> None:
        try:
            self._client.delete(self._key(session_id))
        except RedisError as exc:
            self._handle_redis_error("destroy", exc)

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except RedisError as exc:
            self._handle_redis_error("ping", exc)


__all__ = ["RedisSessionStore"]
