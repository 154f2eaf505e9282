"""Tests for issuing and verifying user tokens against the database."""

import uuid

import pytest

from tubetalk.auth.factory import get_auth_adapter_cached
from tubetalk.auth.tokens import issue_token, verify_token


@pytest.mark.integration
class TestTokens:
    @pytest.mark.asyncio
    async def test_issued_token_resolves_to_user(self, alice):
        token = await issue_token(alice)

        user = await verify_token(token)

        assert user is not None
        assert user.id == alice.id
        assert user.username == "alice"

    @pytest.mark.asyncio
    async def test_tokens_resolve_to_their_own_user(self, alice, bob):
        alice_user = await verify_token(await issue_token(alice))
        bob_user = await verify_token(await issue_token(bob))

        assert alice_user.id == alice.id
        assert bob_user.id == bob.id

    @pytest.mark.asyncio
    async def test_missing_token(self, database):
        assert await verify_token(None) is None
        assert await verify_token("") is None

    @pytest.mark.asyncio
    async def test_invalid_token(self, database):
        assert await verify_token("definitely.not.valid") is None

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, database):
        token = await get_auth_adapter_cached().issue_token(uuid.uuid4())

        assert await verify_token(token) is None

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_subject(self, database):
        adapter = get_auth_adapter_cached()
        token = await adapter.issue_token(uuid.uuid4(), claims={"sub": "not-a-uuid"})

        assert await verify_token(token) is None
