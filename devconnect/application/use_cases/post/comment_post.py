# Standard library imports
import logging
from typing import List, Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Comment
from ....domain.exceptions import NotFoundError
from ....domain.sub_collections import prepend, remove_first
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import CommentResponse
from .post_lookup import find_authored_comment, load_post, require_text

logger = logging.getLogger(__name__)


def _comments(post) -> List[CommentResponse]:
    return [CommentResponse.from_domain(comment) for comment in post.comments]


class AddCommentUseCase:
    """Use case for commenting on a post. Open to any authenticated user."""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, post_id: str, user_id: str, text: Optional[str]) -> List[CommentResponse]:
        """
        Add a comment to the front of the post's comments

        The author's current name and avatar are copied onto the comment.

        Returns:
            The post's comments after the change

        Raises:
            ValidationError: If text is blank
            NotFoundError: If the post or the author does not exist
        """
        text = require_text(text)
        post = await load_post(self.post_repository, post_id)

        author = await self.user_repository.find_by_id(user_id)
        if author is None:
            raise NotFoundError("User not found")

        comment = Comment(
            id=None,  # Assigned by repository
            user=user_id,
            text=text,
            name=author.name,
            avatar=author.avatar,
            date=utc_now(),
        )
        prepend(post.comments, comment)
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} commented on post {post_id}")
        return _comments(saved_post)


class EditCommentUseCase:
    """Use case for editing the text of one's own comment"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(
        self,
        post_id: str,
        comment_id: str,
        user_id: str,
        text: Optional[str],
    ) -> List[CommentResponse]:
        """
        Replace the text of a comment; every other field is kept

        Raises:
            ValidationError: If text is blank
            NotFoundError: If the post or the comment does not exist
            ForbiddenError: If user_id did not write the comment
        """
        text = require_text(text)
        post = await load_post(self.post_repository, post_id)
        comment = find_authored_comment(post, comment_id, user_id)

        comment.text = text
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} edited comment {comment_id} on post {post_id}")
        return _comments(saved_post)


class DeleteCommentUseCase:
    """Use case for deleting one's own comment"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, comment_id: str, user_id: str) -> List[CommentResponse]:
        """
        Remove the comment with comment_id

        Only that comment is removed, even when the same user wrote others.

        Raises:
            NotFoundError: If the post or the comment does not exist
            ForbiddenError: If user_id did not write the comment
        """
        post = await load_post(self.post_repository, post_id)
        find_authored_comment(post, comment_id, user_id)

        remove_first(post.comments, lambda c: c.id == comment_id)
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} deleted comment {comment_id} on post {post_id}")
        return _comments(saved_post)
