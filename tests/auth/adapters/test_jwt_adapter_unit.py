"""Unit tests for JWT authentication adapter (without database dependencies)."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from tubetalk.auth.adapters.base import AuthenticationError
from tubetalk.auth.adapters.jwt import JWTAuthAdapter


@pytest.fixture
def secret_key():
    return "unit-secret-key"


@pytest.fixture
def jwt_adapter(secret_key):
    return JWTAuthAdapter(
        secret_key=secret_key,
        algorithm="HS256",
        issuer="test-tubetalk",
        audience="test-api",
    )


@pytest.fixture
def valid_token(secret_key):
    now = datetime.now(UTC)
    payload = {
        "iss": "test-tubetalk",
        "aud": "test-api",
        "sub": "test-user-123",
        "username": "tester",
        "iat": now,
        "nbf": now,
        "exp": now + timedelta(hours=1),
    }
    return jwt.encode(payload, secret_key, algorithm="HS256")


@pytest.mark.unit
class TestJWTAdapter:
    """Test JWT authentication adapter."""

    @pytest.mark.asyncio
    async def test_verify_valid_token(self, jwt_adapter, valid_token):
        principal = await jwt_adapter.verify_token(valid_token)

        assert principal["provider"] == "jwt"
        assert principal["subject"] == "test-user-123"
        assert principal["username"] == "tester"
        assert "claims" in principal

    @pytest.mark.asyncio
    async def test_verify_expired_token(self, jwt_adapter, secret_key):
        past_time = datetime.now(UTC) - timedelta(hours=2)
        payload = {
            "iss": "test-tubetalk",
            "aud": "test-api",
            "sub": "test-user-123",
            "exp": past_time + timedelta(minutes=30),
        }
        expired_token = jwt.encode(payload, secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(expired_token)

    @pytest.mark.asyncio
    async def test_verify_token_signed_with_other_secret(self, jwt_adapter, valid_token):
        forged = JWTAuthAdapter(
            secret_key="someone-elses-secret", issuer="test-tubetalk", audience="test-api"
        )
        token = await forged.issue_token(uuid4())

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_wrong_audience(self, jwt_adapter, secret_key):
        other = JWTAuthAdapter(secret_key=secret_key, issuer="test-tubetalk", audience="elsewhere")
        token = await other.issue_token(uuid4())

        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_missing_subject(self, jwt_adapter, secret_key):
        now = datetime.now(UTC)
        payload = {
            "iss": "test-tubetalk",
            "aud": "test-api",
            "iat": now,
            "exp": now + timedelta(hours=1),
        }
        token = jwt.encode(payload, secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Missing 'sub' claim"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_garbage(self, jwt_adapter):
        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token("not-a-jwt")

    @pytest.mark.asyncio
    async def test_issue_token(self, jwt_adapter, secret_key):
        user_id = uuid4()
        token = await jwt_adapter.issue_token(user_id, claims={"username": "ana"})

        payload = jwt.decode(
            token, secret_key, algorithms=["HS256"], issuer="test-tubetalk", audience="test-api"
        )
        assert payload["sub"] == str(user_id)
        assert payload["username"] == "ana"
        assert payload["exp"] > payload["iat"]

    @pytest.mark.asyncio
    async def test_issued_token_verifies(self, jwt_adapter):
        user_id = uuid4()
        token = await jwt_adapter.issue_token(user_id)

        principal = await jwt_adapter.verify_token(token)
        assert principal["subject"] == str(user_id)

    @pytest.mark.asyncio
    async def test_peek_subject(self, jwt_adapter):
        user_id = uuid4()
        token = await jwt_adapter.issue_token(user_id)

        assert jwt_adapter.peek_subject(token) == str(user_id)
        assert jwt_adapter.peek_subject("garbage") is None
