# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Comment, Like, Post
from ...domain.constants import CommentFields, LikeFields, PostFields
from ...domain.exceptions import RepositoryError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_post_collection
from .object_ids import as_reference, ensure_object_id, to_object_id

logger = logging.getLogger(__name__)


class MongoPostRepository(PostRepository):
    """
    MongoDB implementation of PostRepository.

    A post is stored as one document with its likes and comments embedded;
    every save replaces the whole document.
    """

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Args:
            post_id: The post ID to find

        Returns:
            Post domain model if found, None otherwise (malformed IDs included)
        """
        object_id = to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding post by ID: {e}", exc_info=True)
            raise RepositoryError(f"Error finding post by ID: {str(e)}", operation="find_by_id")

        if document is None:
            return None
        return self._document_to_post(document)

    async def find_by_owner(self, user_id: str) -> List[Post]:
        """
        Find all posts written by a user, newest first

        Args:
            user_id: The author's user ID

        Returns:
            List of Post domain models
        """
        if not user_id:
            return []
        return await self._find_many({PostFields.USER: as_reference(user_id)}, operation="find_by_owner")

    async def find_all(self) -> List[Post]:
        """
        Find all posts, newest first

        Returns:
            List of Post domain models
        """
        return await self._find_many({}, operation="find_all")

    async def save(self, post: Post) -> Post:
        """
        Save post (create new or replace existing)

        Embedded comments without an ID are given a fresh ObjectId.

        Args:
            post: Post domain model to save

        Returns:
            Saved Post domain model as stored
        """
        if not post:
            raise ValueError("Post cannot be None")

        post_dict = self._post_to_dict(post)

        try:
            if post.id:
                object_id = to_object_id(post.id)
                if object_id is None:
                    raise ValueError(f"Invalid post ID format: {post.id}")

                replace_result = await self.post_collection.replace_one(
                    {PostFields.MONGO_ID: object_id},
                    post_dict,
                )
                if replace_result.matched_count == 0:
                    raise ValueError(f"Post with ID {post.id} not found")
            else:
                result = await self.post_collection.insert_one(post_dict)
                object_id = result.inserted_id

            # Fetch and return the stored document
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error saving post: {e}", exc_info=True)
            raise RepositoryError(f"Error saving post: {str(e)}", operation="save")

        if document is None:
            raise RepositoryError("Post was saved but could not be retrieved", operation="save")
        return self._document_to_post(document)

    async def remove(self, post: Post) -> None:
        """Remove a post"""
        object_id = to_object_id(post.id)
        if object_id is None:
            return

        try:
            await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error removing post: {e}", exc_info=True)
            raise RepositoryError(f"Error removing post: {str(e)}", operation="remove")

    async def remove_by_owner(self, user_id: str) -> int:
        """Remove every post written by a user, returning the count"""
        if not user_id:
            return 0

        try:
            result = await self.post_collection.delete_many({PostFields.USER: as_reference(user_id)})
        except PyMongoError as e:
            logger.error(f"Error removing posts for user: {e}", exc_info=True)
            raise RepositoryError(f"Error removing posts for user: {str(e)}", operation="remove_by_owner")
        return result.deleted_count

    async def _find_many(self, query: Dict[str, Any], operation: str) -> List[Post]:
        try:
            cursor = self.post_collection.find(query).sort(PostFields.DATE, DESCENDING)
            posts = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except PyMongoError as e:
            logger.error(f"Error listing posts: {e}", exc_info=True)
            raise RepositoryError(f"Error listing posts: {str(e)}", operation=operation)

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise RepositoryError("Invalid document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            user=str(document.get(PostFields.USER, "")),
            text=document.get(PostFields.TEXT, ""),
            name=document.get(PostFields.NAME),
            avatar=document.get(PostFields.AVATAR),
            date=ensure_utc(document.get(PostFields.DATE)),
            likes=[
                Like(user=str(like[LikeFields.USER]))
                for like in document.get(PostFields.LIKES) or []
            ],
            comments=[
                Comment(
                    id=str(comment[CommentFields.MONGO_ID]),
                    user=str(comment[CommentFields.USER]),
                    text=comment.get(CommentFields.TEXT, ""),
                    name=comment.get(CommentFields.NAME),
                    avatar=comment.get(CommentFields.AVATAR),
                    date=ensure_utc(comment.get(CommentFields.DATE)),
                )
                for comment in document.get(PostFields.COMMENTS) or []
            ],
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document (without _id)

        User references are stored as ObjectIds so they can be matched
        against the users collection.

        Args:
            post: Post domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            PostFields.USER: as_reference(post.user),
            PostFields.TEXT: post.text,
            PostFields.NAME: post.name,
            PostFields.AVATAR: post.avatar,
            PostFields.DATE: post.date,
            PostFields.LIKES: [
                {LikeFields.USER: as_reference(like.user)}
                for like in post.likes
            ],
            PostFields.COMMENTS: [
                {
                    CommentFields.MONGO_ID: ensure_object_id(comment.id),
                    CommentFields.USER: as_reference(comment.user),
                    CommentFields.TEXT: comment.text,
                    CommentFields.NAME: comment.name,
                    CommentFields.AVATAR: comment.avatar,
                    CommentFields.DATE: comment.date,
                }
                for comment in post.comments
            ],
        }
