# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Like
from ....domain.exceptions import ConflictError
from ....domain.sub_collections import prepend, remove_first
from ...dto.post_dto import LikeResponse
from .post_lookup import load_post

logger = logging.getLogger(__name__)


class LikePostUseCase:
    """Use case for liking a post. Any authenticated user may like any post once."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user_id: str) -> List[LikeResponse]:
        """
        Add a like by user_id to the front of the post's likes

        Returns:
            The post's likes after the change

        Raises:
            NotFoundError: If post not found
            ConflictError: If user_id already liked the post
        """
        post = await load_post(self.post_repository, post_id)

        if post.is_liked_by(user_id):
            raise ConflictError("Post already liked")

        prepend(post.likes, Like(user=user_id))
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} liked post {post_id}")
        return [LikeResponse.from_domain(like) for like in saved_post.likes]


class UnlikePostUseCase:
    """Use case for withdrawing a like"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user_id: str) -> List[LikeResponse]:
        """
        Remove the like left by user_id

        Returns:
            The post's likes after the change

        Raises:
            NotFoundError: If post not found
            ConflictError: If user_id has not liked the post
        """
        post = await load_post(self.post_repository, post_id)

        removed = remove_first(post.likes, lambda like: like.user == user_id)
        if removed is None:
            raise ConflictError("Post has not yet been liked")

        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} unliked post {post_id}")
        return [LikeResponse.from_domain(like) for like in saved_post.likes]
