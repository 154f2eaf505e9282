from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import delete, select, update

from ...database.connection import get_async_session
from ...dbmodels import Comments, utcnow
from ...logging import get_logger
from ..access_control import parse_id, require_authenticated
from ..errors import InvalidIdError, NotFoundForAuthorError

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post

logger = get_logger(__name__)


def to_comment_type(comment: Comments) -> Comment:
    """Convert a SQLAlchemy comment into its GraphQL type."""
    from ..types.comment import Comment as CommentType

    return CommentType(
        id=strawberry.ID(str(comment.id)),
        user_id=strawberry.ID(str(comment.user_id)),
        post_id=strawberry.ID(str(comment.post_id)),
        comment=comment.comment,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


# Field resolvers
async def resolve_post_comments(post: Post, info: strawberry.Info) -> list[Comment]:
    """Resolve the comments written on a post."""
    async with get_async_session() as session:
        stmt = select(Comments).where(Comments.post_id == parse_id(post.id))
        result = await session.execute(stmt)
        comments = result.scalars().all()

    return [to_comment_type(comment) for comment in comments]


# Mutation resolvers
async def create_comment(info: strawberry.Info, comment: str, post_id: str) -> Comment:
    """Create a comment owned by the authenticated caller."""
    auth_context = require_authenticated(info, "addComment")

    parsed_post_id = parse_id(post_id)
    if parsed_post_id is None:
        raise InvalidIdError("postId")

    async with get_async_session() as session:
        row = Comments(
            user_id=auth_context.user_id,
            post_id=parsed_post_id,
            comment=comment,
        )
        session.add(row)
        await session.flush()

    logger.info(
        "Comment created",
        comment_id=str(row.id),
        post_id=post_id,
        user_id=str(row.user_id),
    )
    return to_comment_type(row)


async def update_comment(info: strawberry.Info, id: str, comment: str) -> Comment:
    """Replace the text of a comment the caller owns."""
    auth_context = require_authenticated(info, "updateComment")

    comment_id = parse_id(id)
    if comment_id is None:
        raise NotFoundForAuthorError("comment")

    async with get_async_session() as session:
        stmt = (
            update(Comments)
            .where(Comments.id == comment_id, Comments.user_id == auth_context.user_id)
            .values(comment=comment, updated_at=utcnow())
            .returning(Comments)
        )
        result = await session.execute(stmt)
        row = result.scalar_one_or_none()

    if row is None:
        logger.info(
            "Comment not found for author",
            comment_id=id,
            user_id=str(auth_context.user_id),
        )
        raise NotFoundForAuthorError("comment")

    logger.info("Comment updated", comment_id=id)
    return to_comment_type(row)


async def delete_comment(info: strawberry.Info, id: str) -> str:
    """Delete a comment the caller owns."""
    auth_context = require_authenticated(info, "deleteComment")

    comment_id = parse_id(id)
    if comment_id is None:
        raise NotFoundForAuthorError("comment")

    async with get_async_session() as session:
        stmt = (
            delete(Comments)
            .where(Comments.id == comment_id, Comments.user_id == auth_context.user_id)
            .returning(Comments.id)
        )
        result = await session.execute(stmt)
        deleted_id = result.scalar_one_or_none()

    if deleted_id is None:
        logger.info(
            "Comment not found for author",
            comment_id=id,
            user_id=str(auth_context.user_id),
        )
        raise NotFoundForAuthorError("comment")

    logger.info("Comment deleted", comment_id=id)
    return "Comment deleted"
