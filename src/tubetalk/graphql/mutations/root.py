"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.comment import Comment
from ..types.post import Post


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Auth mutations
    @strawberry.mutation(description="register user")
    async def register(
        self,
        info: strawberry.Info,
        username: str,
        access_token: str,
        avatar_url: str | None = None,
    ) -> str:
        from ..resolvers.auth import register

        return await register(info, username, access_token, avatar_url)

    @strawberry.mutation(description="login user")
    async def login(self, info: strawberry.Info, access_token: str) -> str:
        from ..resolvers.auth import login

        return await login(info, access_token)

    # Post mutations
    @strawberry.mutation(name="addPost", description="create a new post")
    async def add_post(self, info: strawberry.Info, title: str, youtube_uri: str) -> Post:
        from ..resolvers.post import create_post

        return await create_post(info, title, youtube_uri)

    @strawberry.mutation(
        name="updatePost", description="update a post, only the author can update it"
    )
    async def update_post(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        title: str | None = None,
        youtube_uri: str | None = None,
    ) -> Post:
        from ..resolvers.post import update_post

        return await update_post(info, id, title, youtube_uri)

    @strawberry.mutation(name="deletePost", description="delete post")
    async def delete_post(self, info: strawberry.Info, id: strawberry.ID) -> str:
        from ..resolvers.post import delete_post

        return await delete_post(info, id)

    # Comment mutations
    @strawberry.mutation(name="addComment", description="create a new comment on the post")
    async def add_comment(
        self,
        info: strawberry.Info,
        comment: str,
        post_id: Annotated[strawberry.ID, strawberry.argument(name="postId")],
    ) -> Comment:
        from ..resolvers.comment import create_comment

        return await create_comment(info, comment, post_id)

    @strawberry.mutation(
        name="updateComment", description="update a comment, only the author can update it"
    )
    async def update_comment(
        self, info: strawberry.Info, id: strawberry.ID, comment: str
    ) -> Comment:
        from ..resolvers.comment import update_comment

        return await update_comment(info, id, comment)

    @strawberry.mutation(name="deleteComment", description="delete comment")
    async def delete_comment(self, info: strawberry.Info, id: strawberry.ID) -> str:
        from ..resolvers.comment import delete_comment

        return await delete_comment(info, id)
