# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Explicit success/failure values returned by use cases.

Expected outcomes such as "no such user" or "no session" come back as ``Err``
instead of being raised, so every caller has to branch on them. Failures of
the infrastructure itself (database down, hashing backend broken) are still
raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from blogapi.shared.errors.base import AppError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):  # noqa: UP046
    value: T


@dataclass(slots=True, frozen=True)
class Err:
    error: AppError


Result = Ok[T] | Err

__all__ = ["Err", "Ok", "Result"]
