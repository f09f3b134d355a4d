# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

SENSITIVE_PATTERNS = [
    # Secrets
    (r"(secret[_-]?key\s*[:=]\s*['\"]?)([^\s'\",]{4,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Passwords and hashes
    (r"(password(?:[_-]?hash)?\s*[:=]\s*['\"]?)([^\s'\",]+)(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(pwd\s*[:=]\s*['\"]?)([^\s'\",]+)(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"\b(scrypt|pbkdf2)(:[^$\s]*)?\$[^$\s]+\$[0-9a-f]+", r"\1$***REDACTED***"),

    # Session ids and cookies
    (r"(session[_-]?id\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{16,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(sid=)([^;\s]+)", r"\1***REDACTED***"),
    (r"(sess:)([a-zA-Z0-9_\-]{16,})", r"\1***REDACTED***"),
    (r"(cookie\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Connection strings with credentials
    (r"(postgres(?:ql)?|mysql|mongodb|redis|rediss)(\+\w+)?://([^:/@\s]+):([^@\s]+)@", r"\1\2://\3:***REDACTED***@"),
]


def sanitize_message(message: str) -> str:
    sanitized = message
    for pattern, replacement, *rest in SENSITIVE_PATTERNS:
        flags = rest[0] if rest else 0
        sanitized = re.sub(pattern, replacement, sanitized, flags=flags)
    return sanitized


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
