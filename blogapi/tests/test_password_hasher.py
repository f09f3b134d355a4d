from __future__ import annotations

import pytest

from blogapi.application.services.password_hashing import WerkzeugPasswordHasher
from blogapi.domain.users.exceptions import HashingError


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


@pytest.mark.parametrize("password", ["secret1", "x", "pässwörd with spaces", "a" * 128])
def test_verify_accepts_own_hash(hasher: WerkzeugPasswordHasher, password: str) -> None:
    assert hasher.verify(password, hasher.hash(password)) is True


def test_verify_rejects_other_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret1")

    assert hasher.verify("secret2", hashed) is False
    assert hasher.verify("Secret1", hashed) is False
    assert hasher.verify("", hashed) is False


def test_hash_is_salted(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert "secret1" not in first


def test_work_factor_is_part_of_the_hash(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.hash("secret1").startswith("pbkdf2:sha256:1000$")


def test_default_method_is_scrypt() -> None:
    hashed = WerkzeugPasswordHasher().hash("secret1")

    assert hashed.startswith("scrypt")
    assert WerkzeugPasswordHasher().verify("secret1", hashed) is True


def test_unknown_method_raises_hashing_error() -> None:
    with pytest.raises(HashingError):
        WerkzeugPasswordHasher(method="nope").hash("secret1")


@pytest.mark.parametrize("stored", ["", "not-a-hash", "nope$salt$abcdef"])
def test_malformed_stored_hash_raises(hasher: WerkzeugPasswordHasher, stored: str) -> None:
    with pytest.raises(HashingError):
        hasher.verify("secret1", stored)
