# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import RepositoryError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_user_collection
from .object_ids import to_object_id

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}", exc_info=True)
            raise RepositoryError(f"Error finding user by email: {str(e)}", operation="find_by_email")

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (malformed IDs included)
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID: {e}", exc_info=True)
            raise RepositoryError(f"Error finding user by ID: {str(e)}", operation="find_by_id")

        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
            else:
                result = await self.user_collection.insert_one(user_dict)
                object_id = result.inserted_id

            # Fetch and return the stored document
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error saving user: {e}", exc_info=True)
            raise RepositoryError(f"Error saving user: {str(e)}", operation="save")

        if document is None:
            raise RepositoryError("User was saved but could not be retrieved", operation="save")
        return self._document_to_user(document)

    async def remove_by_id(self, user_id: str) -> bool:
        """
        Remove user by ID

        Returns:
            True if a user was deleted
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error removing user: {e}", exc_info=True)
            raise RepositoryError(f"Error removing user: {str(e)}", operation="remove_by_id")
        return result.deleted_count > 0

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise RepositoryError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            avatar=document.get(UserFields.AVATAR),
            date=ensure_utc(document.get(UserFields.DATE)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.AVATAR: user.avatar,
            UserFields.DATE: user.date,
        }
