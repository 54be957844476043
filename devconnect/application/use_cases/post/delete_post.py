# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.user_dto import MessageResponse
from .post_lookup import load_owned_post

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user_id: str) -> MessageResponse:
        """
        Delete a post owned by user_id

        Raises:
            NotFoundError: If post not found
            ForbiddenError: If user_id does not own the post
        """
        post = await load_owned_post(self.post_repository, post_id, user_id)
        await self.post_repository.remove(post)
        logger.info(f"User {user_id} deleted post {post_id}")
        return MessageResponse(msg="Post removed")
