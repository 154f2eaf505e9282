from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select

from ...database.connection import get_async_session
from ...dbmodels import Users
from ...logging import get_logger
from ..access_control import parse_id

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


def to_user_type(user: Users) -> User:
    """Convert a SQLAlchemy user into its GraphQL type."""
    from ..types.user import User as UserType

    return UserType(
        id=strawberry.ID(str(user.id)),
        username=user.username,
        avatar_url=user.avatar_url,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


async def _load_user(id: str) -> User | None:
    user_id = parse_id(id)
    if user_id is None:
        return None

    async with get_async_session() as session:
        user = await session.get(Users, user_id)

    return to_user_type(user) if user else None


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    """Resolve every registered user."""
    async with get_async_session() as session:
        result = await session.execute(select(Users))
        users = result.scalars().all()

    return [to_user_type(user) for user in users]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    """Resolve a user by ID; unknown or malformed IDs resolve to None."""
    user = await _load_user(id)
    if user is None:
        logger.info("User not found", user_id=id)
    return user


# Field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    return await _load_user(post.author_id)


async def resolve_comment_user(comment: Comment, info: strawberry.Info) -> User | None:
    return await _load_user(comment.user_id)
