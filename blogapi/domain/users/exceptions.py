# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from blogapi.shared.errors.base import DomainError, InfrastructureError


class DuplicateUserError(DomainError):
    # no message: signup failures must not reveal which usernames exist
    code = "duplicate_user"


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "user not found"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "incorrect username or password"


class UnauthorizedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "unauthorized"


class HashingError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("hashing_failed")


class SessionStoreError(InfrastructureError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"session_{operation}_failed")
