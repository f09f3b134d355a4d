# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from blogapi.domain.users.entities import User as DomainUser
from blogapi.domain.users.exceptions import DuplicateUserError
from blogapi.domain.users.repositories import UserRepository
from blogapi.infrastructure.db import Database
from blogapi.infrastructure.db.models import User
from blogapi.shared.errors.base import ValidationError


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite hands back naive datetimes
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def create(self, username: str, password_hash: str) -> DomainUser:
        missing = [
            name
            for name, value in (("username", username), ("password_hash", password_hash))
            if not value
        ]
        if missing:
            raise ValidationError(context={"fields": missing})

        try:
            with self._db.session_scope() as session:
                row = User(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateUserError() from exc

    def find_by_username(self, username: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_domain(row) if row else None
