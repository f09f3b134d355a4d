"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from blogapi.domain.users.exceptions import HashingError
from blogapi.domain.users.repositories import PasswordHasher
from blogapi.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes via werkzeug.

    ``method`` carries the work factor, e.g. ``scrypt:32768:8:1`` or
    ``pbkdf2:sha256:600000``.
    """

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (ValueError, TypeError) as exc:
            logger.error(f"hasher: hash failed method={self._method}: {type(exc).__name__}")
            raise HashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed or hashed.count("$") < 2:
            logger.error("hasher: stored hash is malformed")
            raise HashingError()
        try:
            return bool(check_password_hash(hashed, password))
        except ValueError as exc:
            logger.error(f"hasher: stored hash uses an unknown method: {exc}")
            raise HashingError() from exc
