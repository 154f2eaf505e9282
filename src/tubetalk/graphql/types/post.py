"""
Post GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Post:
    """A post sharing an external video."""

    id: strawberry.ID
    author_id: strawberry.ID = strawberry.field(name="authorId")
    title: str
    youtube_url: str
    created_at: datetime = strawberry.field(name="createdAt")
    updated_at: datetime = strawberry.field(name="updatedAt")

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the user who wrote this post."""
        from ..resolvers.user import resolve_post_author

        return await resolve_post_author(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get comments on this post."""
        from ..resolvers.comment import resolve_post_comments

        return await resolve_post_comments(self, info)
