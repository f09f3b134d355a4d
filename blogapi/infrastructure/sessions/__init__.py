# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from redis import Redis

from blogapi.domain.users.repositories import SessionStore
from blogapi.shared.config import SessionConfig
from blogapi.shared.logging import logger

from .memory_store import InMemorySessionStore
from .redis_store import RedisSessionStore


def build_session_store(config: SessionConfig) -> SessionStore:
    if config.backend == "memory":
        logger.info("sessions: using in-process store")
        return InMemorySessionStore()

    # the client's pool connects lazily and reconnects on its own
    client = Redis.from_url(
        config.redis_url,
        decode_responses=True,
        socket_timeout=config.redis_socket_timeout,
        socket_connect_timeout=config.redis_socket_timeout,
    )
    logger.info(f"sessions: using redis at {config.redis_url}")
    return RedisSessionStore(client, key_prefix=config.key_prefix)


__all__ = ["InMemorySessionStore", "RedisSessionStore", "build_session_store"]
