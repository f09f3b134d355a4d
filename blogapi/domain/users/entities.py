# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class PublicUser:
    """What a client may see about a user."""

    username: str


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def public(self) -> PublicUser:
        return PublicUser(username=self.username)


@dataclass(slots=True, frozen=True)
class SessionUser:
    """User reference stored inside a session payload."""

    id: int
    username: str


@dataclass(slots=True, frozen=True)
class SessionData:
    user: SessionUser | None


@dataclass(slots=True, frozen=True)
class LoginSession:

    session_id: str
    user: PublicUser
