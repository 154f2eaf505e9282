from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry
from sqlalchemy import delete, select, update

from ...database.connection import get_async_session
from ...dbmodels import Posts, utcnow
from ...logging import get_logger
from ..access_control import parse_id, require_authenticated
from ..errors import NotFoundForAuthorError

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


def to_post_type(post: Posts) -> Post:
    """Convert a SQLAlchemy post into its GraphQL type."""
    from ..types.post import Post as PostType

    return PostType(
        id=strawberry.ID(str(post.id)),
        author_id=strawberry.ID(str(post.author_id)),
        title=post.title,
        youtube_url=post.youtube_url,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


# Query resolvers
async def resolve_posts(info: strawberry.Info) -> list[Post]:
    """Resolve every post."""
    async with get_async_session() as session:
        result = await session.execute(select(Posts))
        posts = result.scalars().all()

    return [to_post_type(post) for post in posts]


async def resolve_post_by_id(info: strawberry.Info, id: str) -> Post | None:
    """Resolve a post by ID; unknown or malformed IDs resolve to None."""
    post_id = parse_id(id)
    if post_id is None:
        logger.info("Malformed post ID", post_id=id)
        return None

    async with get_async_session() as session:
        post = await session.get(Posts, post_id)

    if not post:
        logger.info("Post not found", post_id=id)
        return None

    return to_post_type(post)


# Field resolvers
async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    """Resolve the posts written by a user."""
    async with get_async_session() as session:
        result = await session.execute(select(Posts).where(Posts.author_id == parse_id(user.id)))
        posts = result.scalars().all()

    return [to_post_type(post) for post in posts]


async def resolve_comment_post(comment: Comment, info: strawberry.Info) -> Post | None:
    return await resolve_post_by_id(info, comment.post_id)


# Mutation resolvers
async def create_post(info: strawberry.Info, title: str, youtube_uri: str) -> Post:
    """Create a post owned by the authenticated caller."""
    auth_context = require_authenticated(info, "addPost")

    async with get_async_session() as session:
        post = Posts(
            author_id=auth_context.user_id,
            title=title,
            youtube_url=youtube_uri,
        )
        session.add(post)
        await session.flush()

    logger.info("Post created", post_id=str(post.id), author_id=str(post.author_id))
    return to_post_type(post)


async def update_post(
    info: strawberry.Info, id: str, title: str | None, youtube_uri: str | None
) -> Post:
    """
    Update a post the caller owns.

    Matching on ID and author in a single UPDATE keeps the ownership check and
    the write atomic. Arguments left out keep their stored value.
    """
    auth_context = require_authenticated(info, "updatePost")

    post_id = parse_id(id)
    if post_id is None:
        raise NotFoundForAuthorError("post")

    values: dict[str, Any] = {"updated_at": utcnow()}
    if title is not None:
        values["title"] = title
    if youtube_uri is not None:
        values["youtube_url"] = youtube_uri

    async with get_async_session() as session:
        stmt = (
            update(Posts)
            .where(Posts.id == post_id, Posts.author_id == auth_context.user_id)
            .values(**values)
            .returning(Posts)
        )
        result = await session.execute(stmt)
        post = result.scalar_one_or_none()

    if post is None:
        logger.info(
            "Post not found for author",
            post_id=id,
            user_id=str(auth_context.user_id),
        )
        raise NotFoundForAuthorError("post")

    logger.info("Post updated", post_id=id)
    return to_post_type(post)


async def delete_post(info: strawberry.Info, id: str) -> str:
    """Delete a post the caller owns."""
    auth_context = require_authenticated(info, "deletePost")

    post_id = parse_id(id)
    if post_id is None:
        raise NotFoundForAuthorError("post")

    async with get_async_session() as session:
        stmt = (
            delete(Posts)
            .where(Posts.id == post_id, Posts.author_id == auth_context.user_id)
            .returning(Posts.id)
        )
        result = await session.execute(stmt)
        deleted_id = result.scalar_one_or_none()

    if deleted_id is None:
        logger.info(
            "Post not found for author",
            post_id=id,
            user_id=str(auth_context.user_id),
        )
        raise NotFoundForAuthorError("post")

    logger.info("Post deleted", post_id=id)
    return "Post deleted"
