# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from blogapi.domain.users.entities import SessionData
from blogapi.domain.users.repositories import SessionStore
from blogapi.shared.logging import logger

from .serialization import dump_session, load_session


@dataclass(slots=True)
class _Entry:
    raw: str
    expires_at: float


class InMemorySessionStore(SessionStore):
    """Process-local session store with fixed TTLs.

    Only suitable for a single process; ``clock`` exists so tests can move time.
    Expired entries are swept on ``create`` at most once per ``sweep_interval``.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        *,
        sweep_interval: float = 60.0,
    ) -> None:
        self._clock = clock
        self._lock = Lock()
        self._store: dict[str, _Entry] = {}
        self._sweep_interval = sweep_interval
        self._next_sweep = clock() + sweep_interval

    def create(self, session_id: str, data: SessionData, ttl_seconds: int) -> None:
        now = self._clock()
        entry = _Entry(raw=dump_session(data), expires_at=now + ttl_seconds)
        with self._lock:
            if now >= self._next_sweep:
                self._sweep_locked(now)
            self._store[session_id] = entry
        logger.debug(f"sessions.memory: stored ttl={ttl_seconds}s")

    def get(self, session_id: str) -> SessionData | None:
        with self._lock:
            entry = self._store.get(session_id)
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                self._store.pop(session_id, None)
                logger.debug("sessions.memory: expired entry dropped")
                return None
            raw = entry.raw
        return load_session(raw)

    def destroy(self, session_id: str) -> None:
        with self._lock:
            self._store.pop(session_id, None)

    def ping(self) -> bool:
        return True

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            return self._sweep_locked(now)

    def _sweep_locked(self, now: float) -> int:
        expired = [key for key, entry in self._store.items() if now >= entry.expires_at]
        for key in expired:
            del self._store[key]
        self._next_sweep = now + self._sweep_interval
        if expired:
            logger.debug(f"sessions.memory: purged {len(expired)} expired entries")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


__all__ = ["InMemorySessionStore"]
