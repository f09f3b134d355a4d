# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain layer for the blogapi backend."""

from .results import Err, Ok, Result
from .users.entities import LoginSession, PublicUser, SessionData, SessionUser, User

__all__ = [
    "Err",
    "LoginSession",
    "Ok",
    "PublicUser",
    "Result",
    "SessionData",
    "SessionUser",
    "User",
]
