# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session_guard import RequestContext, SessionGuard

__all__ = ["RequestContext", "SessionGuard"]
