"""Issue and verify the signed tokens handed out by register/login."""

from __future__ import annotations

from uuid import UUID

from ..database.connection import get_async_session
from ..dbmodels import Users
from ..logging import get_logger
from .adapters.base import AuthenticationError
from .factory import get_auth_adapter_cached

logger = get_logger(__name__)


async def issue_token(user: Users) -> str:
    """Issue a signed token whose subject is the user's ID."""
    adapter = get_auth_adapter_cached()
    return await adapter.issue_token(user.id, claims={"username": user.username})


async def verify_token(token: str | None) -> Users | None:
    """
    Resolve a token to the user it was issued for.

    Returns None for a missing, malformed, expired or forged token, and for a
    token whose user no longer exists.
    """
    if not token:
        return None

    adapter = get_auth_adapter_cached()
    try:
        principal = await adapter.verify_token(token)
    except AuthenticationError as e:
        logger.info("Token rejected", error=str(e))
        return None

    try:
        user_id = UUID(principal["subject"])
    except ValueError:
        logger.warning("Token subject is not a user ID", subject=principal["subject"])
        return None

    async with get_async_session() as session:
        user = await session.get(Users, user_id)

    if user is None:
        logger.info("Token subject does not match any user", user_id=str(user_id))
    return user
