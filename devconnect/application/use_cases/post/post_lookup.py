"""Shared lookups used by the post use cases."""

# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Comment, Post
from ....domain.exceptions import ForbiddenError, NotFoundError, ValidationError
from ....domain.sub_collections import find_first
from ....domain.validation import is_blank

logger = logging.getLogger(__name__)


async def load_post(post_repository: PostRepository, post_id: str) -> Post:
    """
    Load a post by ID

    Raises:
        NotFoundError: If no post has this ID (malformed IDs included)
    """
    post = await post_repository.find_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found", details={"post_id": post_id})
    return post


async def load_owned_post(post_repository: PostRepository, post_id: str, user_id: str) -> Post:
    """
    Load a post the acting user owns

    Raises:
        NotFoundError: If the post does not exist
        ForbiddenError: If the post belongs to someone else
    """
    post = await load_post(post_repository, post_id)
    if not post.is_owned_by(user_id):
        logger.warning(f"User {user_id} denied write access to post {post_id}")
        raise ForbiddenError("User not authorized")
    return post


def find_authored_comment(post: Post, comment_id: str, user_id: str) -> Comment:
    """
    Find a comment on post written by the acting user

    Raises:
        NotFoundError: If the post has no comment with this ID
        ForbiddenError: If the comment was written by someone else
    """
    comment: Optional[Comment] = find_first(post.comments, lambda c: c.id == comment_id)
    if comment is None:
        raise NotFoundError("Comment not found", details={"comment_id": comment_id})
    if comment.user != user_id:
        logger.warning(f"User {user_id} denied write access to comment {comment_id}")
        raise ForbiddenError("User not authorized")
    return comment


def require_text(text: Optional[str]) -> str:
    """Return text as given, rejecting blank input."""
    if is_blank(text):
        raise ValidationError.single("text", "Text is required")
    return text
