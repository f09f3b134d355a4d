"""Use-case for ending a session."""

from __future__ import annotations

from blogapi.domain.users.repositories import SessionStore
from blogapi.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, session_id: str | None) -> None:
        if session_id:
            self._sessions.destroy(session_id)
            logger.info("auth.logout: session destroyed")
