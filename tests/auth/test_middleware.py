"""Tests for building the per-request auth context."""

import pytest

from tubetalk.auth.middleware import extract_bearer_token, get_auth_context
from tubetalk.auth.tokens import issue_token


@pytest.mark.unit
class TestExtractBearerToken:
    def test_missing_header(self):
        assert extract_bearer_token(None) is None
        assert extract_bearer_token("") is None

    def test_bearer_header(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_wrong_scheme(self):
        assert extract_bearer_token("Basic dXNlcjpwYXNz") is None

    def test_empty_token(self):
        assert extract_bearer_token("Bearer ") is None
        assert extract_bearer_token("Bearer    ") is None


@pytest.mark.integration
class TestGetAuthContext:
    @pytest.mark.asyncio
    async def test_no_header_is_unauthenticated(self, database):
        auth_context = await get_auth_context(None)

        assert not auth_context.is_authenticated
        assert auth_context.verified_user is None

    @pytest.mark.asyncio
    async def test_valid_token_is_authenticated(self, alice):
        token = await issue_token(alice)

        auth_context = await get_auth_context(f"Bearer {token}")

        assert auth_context.is_authenticated
        assert auth_context.user_id == alice.id
        assert auth_context.verified_user.username == "alice"
        assert auth_context.token == token

    @pytest.mark.asyncio
    async def test_invalid_token_is_unauthenticated(self, database):
        auth_context = await get_auth_context("Bearer forged-token")

        assert not auth_context.is_authenticated
        assert auth_context.user_id is None
