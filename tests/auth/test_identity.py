"""Tests for bearer credential verification."""

from datetime import UTC, datetime, timedelta
from unittest.mock import patch
from uuid import uuid4

import pytest
from jose import jwt

from app.auth.identity import (
    extract_bearer_token,
    get_identity,
    resolve_identity,
    verify_identity,
)
from app.configs import settings
from app.errors import AuthenticationError
from app.managers.token_manager import create_access_token


def sign(claims: dict[str, object], key: str | None = None) -> str:
    return jwt.encode(
        claims,
        key or settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def base_claims() -> dict[str, object]:
    now = datetime.now(UTC)
    return {
        "sub": "mluukkai",
        "user_id": str(uuid4()),
        "jti": str(uuid4()),
        "iat": now,
        "exp": now + timedelta(minutes=5),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": "access",
    }


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc.def.ghi", "abc.def.ghi"),
            ("BEARER abc.def.ghi", "abc.def.ghi"),
            ("  Bearer   abc.def.ghi  ", "abc.def.ghi"),
        ],
    )
    def test_accepts_bearer_scheme(self, header: str, expected: str) -> None:
        assert extract_bearer_token(header) == expected

    @pytest.mark.parametrize(
        "header",
        [None, "", "Bearer", "Bearer ", "Basic abc", "abc.def.ghi", "Bearer a b"],
    )
    def test_rejects_missing_or_malformed(self, header: str | None) -> None:
        assert extract_bearer_token(header) is None


class TestVerifyIdentity:
    def test_valid_token_yields_identity(self) -> None:
        user_id = uuid4()
        token = create_access_token(user_id=user_id, username="mluukkai")

        identity = verify_identity(f"Bearer {token}")

        assert identity.username == "mluukkai"
        assert identity.user_id == user_id

    def test_missing_header(self) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            verify_identity(None)
        assert exc_info.value.detail == "token missing or invalid"
        assert exc_info.value.status_code == 401

    def test_malformed_header(self) -> None:
        token = create_access_token(user_id=uuid4(), username="mluukkai")
        with pytest.raises(AuthenticationError):
            verify_identity(f"Token {token}")

    def test_garbage_token(self) -> None:
        with pytest.raises(AuthenticationError):
            verify_identity("Bearer not-a-jwt")

    def test_expired_token(self) -> None:
        token = create_access_token(
            user_id=uuid4(),
            username="mluukkai",
            expires_delta=timedelta(seconds=-1),
        )
        with pytest.raises(AuthenticationError):
            verify_identity(f"Bearer {token}")

    def test_tampered_signature(self) -> None:
        token = create_access_token(user_id=uuid4(), username="mluukkai")
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"
        with pytest.raises(AuthenticationError):
            verify_identity(f"Bearer {tampered}")

    def test_signed_with_other_key(self) -> None:
        token = sign(base_claims(), key="some-other-secret")
        with pytest.raises(AuthenticationError):
            verify_identity(f"Bearer {token}")

    @pytest.mark.parametrize("claim", ["sub", "user_id"])
    def test_missing_subject_claims(self, claim: str) -> None:
        claims = base_claims()
        del claims[claim]
        with pytest.raises(AuthenticationError):
            verify_identity(f"Bearer {sign(claims)}")

    def test_wrong_audience(self) -> None:
        token = sign({**base_claims(), "aud": "someone-else"})
        with pytest.raises(AuthenticationError):
            verify_identity(f"Bearer {token}")

    def test_non_uuid_user_id(self) -> None:
        token = sign({**base_claims(), "user_id": "42"})
        assert resolve_identity(f"Bearer {token}") is None


class TestGetIdentity:
    async def test_no_header_is_anonymous(self) -> None:
        assert await get_identity(None) is None
        assert await get_identity("") is None

    async def test_valid_header_yields_identity(self) -> None:
        user_id = uuid4()
        token = create_access_token(username="hellas", user_id=user_id)

        identity = await get_identity(f"Bearer {token}")

        assert identity is not None
        assert identity.username == "hellas"
        assert identity.user_id == user_id

    @pytest.mark.parametrize("header", ["Bearer not-a-jwt", "Basic abc", "Bearer"])
    async def test_rejected_header_is_anonymous(self, header: str) -> None:
        assert await get_identity(header) is None

    async def test_rejection_goes_through_verifier(self) -> None:
        with patch(
            "app.auth.identity.verify_identity",
            side_effect=AuthenticationError,
        ) as verifier:
            assert await get_identity("Bearer abc.def.ghi") is None

        verifier.assert_called_once_with("Bearer abc.def.ghi")
