# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionData, User


class UserRepository(Protocol):
    def create(self, username: str, password_hash: str) -> User: ...
    def find_by_username(self, username: str) -> User | None: ...


class SessionStore(Protocol):
    def create(self, session_id: str, data: SessionData, ttl_seconds: int) -> None: ...
    def get(self, session_id: str) -> SessionData | None: ...
    def destroy(self, session_id: str) -> None: ...
    def ping(self) -> bool: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
