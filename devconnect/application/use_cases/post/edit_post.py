# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from .post_lookup import load_owned_post, require_text

logger = logging.getLogger(__name__)


class EditPostUseCase:
    """Use case for replacing the text of a post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user_id: str, text: Optional[str]) -> PostResponse:
        """
        Replace the text of a post owned by user_id

        Raises:
            ValidationError: If text is blank
            NotFoundError: If post not found
            ForbiddenError: If user_id does not own the post
        """
        text = require_text(text)
        post = await load_owned_post(self.post_repository, post_id, user_id)

        post.text = text
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} edited post {post_id}")
        return PostResponse.from_domain(saved_post)
