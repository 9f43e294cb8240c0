"""Tests for password hashing."""

import pytest

from app.managers.password_manager import PasswordHasher, hash_password, verify_password


class TestPasswordHasher:
    def test_hash_and_verify(self) -> None:
        hasher = PasswordHasher()
        hashed = hasher.hash("salainen")

        assert hashed.startswith("$argon2")
        assert hasher.verify("salainen", hashed)
        assert not hasher.verify("wrong", hashed)

    def test_empty_password_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            PasswordHasher().hash("")

    def test_malformed_hash_does_not_verify(self) -> None:
        assert not PasswordHasher().verify("salainen", "not-a-real-hash")


async def test_async_helpers_round_trip() -> None:
    hashed = await hash_password("salainen")
    assert await verify_password("salainen", hashed)
    assert not await verify_password("other", hashed)
