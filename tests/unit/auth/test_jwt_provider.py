"""Unit tests for JWTAuthProvider.

Covers token issuance and the rejection paths of validate_token:
- payload shape of issued tokens
- wrong secret, expired token, garbage input
- missing or malformed user id claims
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from jose import jwt as jose_jwt

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_hs256_token(payload: dict, secret: str = "test-secret") -> str:
    """Create an HS256-signed JWT with a given payload."""
    return jose_jwt.encode(payload, secret, algorithm="HS256")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


@pytest.fixture
def token_user() -> TokenUser:
    return TokenUser(id=uuid4())


# ---------------------------------------------------------------------------
# Tests: create_token
# ---------------------------------------------------------------------------


class TestCreateToken:
    def test_payload_carries_user_id_twice(self, provider: JWTAuthProvider, token_user: TokenUser):
        token = provider.create_token(token_user)

        payload = jose_jwt.decode(token, "test-secret", algorithms=["HS256"])

        assert payload["sub"] == str(token_user.id)
        assert payload["user"] == {"id": str(token_user.id)}

    def test_expiry_follows_configured_lifetime(self, token_user: TokenUser):
        provider = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=6000)

        payload = jose_jwt.decode(
            provider.create_token(token_user), "test-secret", algorithms=["HS256"]
        )

        assert payload["exp"] - payload["iat"] == 6000 * 60

    async def test_round_trip(self, provider: JWTAuthProvider, token_user: TokenUser):
        result = await provider.validate_token(provider.create_token(token_user))

        assert result == token_user


# ---------------------------------------------------------------------------
# Tests: validate_token rejections
# ---------------------------------------------------------------------------


class TestValidateTokenRejections:
    async def test_should_return_none_for_wrong_secret(
        self, provider: JWTAuthProvider, token_user: TokenUser
    ):
        other = JWTAuthProvider(secret_key="other-secret", algorithm="HS256", expire_minutes=30)

        result = await provider.validate_token(other.create_token(token_user))

        assert result is None

    async def test_should_return_none_for_expired_token(
        self, provider: JWTAuthProvider, token_user: TokenUser
    ):
        expired = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=-1)

        result = await provider.validate_token(expired.create_token(token_user))

        assert result is None

    async def test_should_return_none_for_garbage(self, provider: JWTAuthProvider):
        assert await provider.validate_token("not-a-jwt") is None

    async def test_should_return_none_when_no_user_claim(self, provider: JWTAuthProvider):
        exp = datetime.utcnow() + timedelta(minutes=5)
        token = _make_hs256_token({"exp": exp})

        assert await provider.validate_token(token) is None

    async def test_should_return_none_for_non_uuid_sub(self, provider: JWTAuthProvider):
        exp = datetime.utcnow() + timedelta(minutes=5)
        token = _make_hs256_token({"sub": "not-a-uuid", "exp": exp})

        assert await provider.validate_token(token) is None

    async def test_should_accept_nested_user_id_without_sub(self, provider: JWTAuthProvider):
        user_id = uuid4()
        exp = datetime.utcnow() + timedelta(minutes=5)
        token = _make_hs256_token({"user": {"id": str(user_id)}, "exp": exp})

        result = await provider.validate_token(token)

        assert result is not None
        assert result.id == user_id
