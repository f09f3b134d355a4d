# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable

from blogapi.domain.results import Err, Ok, Result
from blogapi.domain.users.entities import LoginSession, SessionData, SessionUser
from blogapi.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from blogapi.domain.users.repositories import PasswordHasher, SessionStore, UserRepository
from blogapi.shared.errors.base import ValidationError
from blogapi.shared.logging import logger


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
        ttl_seconds: int,
        session_id_factory: Callable[[], str] = new_session_id,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher
        self._ttl_seconds = ttl_seconds
        self._session_id_factory = session_id_factory

    def execute(self, username: str, password: str) -> Result[LoginSession]:
        missing = [name for name, value in (("username", username), ("password", password)) if not value]
        if missing:
            return Err(ValidationError(context={"fields": missing}))

        user = self._users.find_by_username(username)
        if user is None:
            logger.info("auth.login: unknown username")
            return Err(UserNotFoundError())

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: wrong password user_id={user.id}")
            return Err(InvalidCredentialsError())

        # every login gets its own session; existing ones for the user are left alone
        session_id = self._session_id_factory()
        self._sessions.create(
            session_id,
            SessionData(user=SessionUser(id=user.id, username=user.username)),
            self._ttl_seconds,
        )
        logger.info(f"auth.login: ok user_id={user.id} ttl={self._ttl_seconds}s")
        return Ok(LoginSession(session_id=session_id, user=user.public()))
