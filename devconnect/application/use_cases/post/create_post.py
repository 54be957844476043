# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ....domain.exceptions import NotFoundError
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import PostResponse
from .post_lookup import require_text

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for publishing a new post"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, user_id: str, text: Optional[str]) -> PostResponse:
        """
        Create a post authored by user_id

        The author's name and avatar are copied onto the post as they are now.

        Raises:
            ValidationError: If text is blank
            NotFoundError: If the author no longer exists
        """
        text = require_text(text)

        author = await self.user_repository.find_by_id(user_id)
        if author is None:
            raise NotFoundError("User not found")

        post = Post(
            id=None,
            user=user_id,
            text=text,
            name=author.name,
            avatar=author.avatar,
            date=utc_now(),
        )
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} created post {saved_post.id}")
        return PostResponse.from_domain(saved_post)
