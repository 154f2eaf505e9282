from __future__ import annotations

import strawberry
from sqlalchemy import select

from ...auth.tokens import issue_token
from ...database.connection import get_async_session
from ...dbmodels import Users
from ...logging import get_logger
from ..errors import UserNotFoundError

logger = get_logger(__name__)


async def register(
    info: strawberry.Info, username: str, access_token: str, avatar_url: str | None
) -> str:
    """Create a user for an external access token and return a signed token.

    A duplicate access token fails on the unique constraint and propagates.
    """
    async with get_async_session() as session:
        user = Users(username=username, access_token=access_token, avatar_url=avatar_url)
        session.add(user)
        await session.flush()

    logger.info("User registered", user_id=str(user.id), username=username)
    return await issue_token(user)


async def login(info: strawberry.Info, access_token: str) -> str:
    """Return a signed token for the user registered with this access token."""
    async with get_async_session() as session:
        result = await session.execute(select(Users).where(Users.access_token == access_token))
        user = result.scalar_one_or_none()

    if user is None:
        logger.info("Login with unknown access token")
        raise UserNotFoundError()

    logger.info("User logged in", user_id=str(user.id))
    return await issue_token(user)
