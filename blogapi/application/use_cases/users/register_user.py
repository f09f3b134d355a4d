# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.results import Err, Ok, Result
from blogapi.domain.users.entities import PublicUser
from blogapi.domain.users.exceptions import DuplicateUserError
from blogapi.domain.users.repositories import PasswordHasher, UserRepository
from blogapi.shared.errors.base import ValidationError
from blogapi.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> Result[PublicUser]:
        missing = [name for name, value in (("username", username), ("password", password)) if not value]
        if missing:
            return Err(ValidationError(context={"fields": missing}))

        hashed = self._password_hasher.hash(password)
        # uniqueness is enforced by the store's insert, not by a lookup first
        try:
            user = self._users.create(username, hashed)
        except DuplicateUserError as exc:
            logger.info("auth.signup: rejected, username taken")
            return Err(exc)

        logger.info(f"auth.signup: ok user_id={user.id}")
        return Ok(user.public())
