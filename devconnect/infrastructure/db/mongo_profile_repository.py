# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.models.profile import Education, Experience, Profile, SocialLinks
from ...domain.constants import (
    EducationFields,
    ExperienceFields,
    ProfileFields,
    SocialFields,
)
from ...domain.exceptions import RepositoryError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_profile_collection
from .object_ids import as_reference, ensure_object_id, to_object_id

logger = logging.getLogger(__name__)

# Domain attribute -> stored key for the social links sub-document
_SOCIAL_KEYS = {
    "youtube": SocialFields.YOUTUBE,
    "facebook": SocialFields.FACEBOOK,
    "twitter": SocialFields.TWITTER,
    "instagram": SocialFields.INSTAGRAM,
    "linkedin": SocialFields.LINKEDIN,
}


class MongoProfileRepository(ProfileRepository):
    """
    MongoDB implementation of ProfileRepository.

    Experience and education entries are embedded in the profile document;
    every save replaces the whole document.
    """

    def __init__(self, profile_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.profile_collection = (
            profile_collection if profile_collection is not None else get_profile_collection()
        )

    async def find_by_id(self, profile_id: str) -> Optional[Profile]:
        """Find profile by ID (None for unknown or malformed IDs)"""
        object_id = to_object_id(profile_id)
        if object_id is None:
            return None
        return await self._find_one({ProfileFields.MONGO_ID: object_id}, operation="find_by_id")

    async def find_by_owner(self, user_id: str) -> Optional[Profile]:
        """Find the profile owned by a user"""
        if not user_id:
            return None
        return await self._find_one({ProfileFields.USER: as_reference(user_id)}, operation="find_by_owner")

    async def find_all(self) -> List[Profile]:
        """Find all profiles"""
        try:
            cursor = self.profile_collection.find({})
            profiles = []
            async for document in cursor:
                profiles.append(self._document_to_profile(document))
            return profiles
        except PyMongoError as e:
            logger.error(f"Error listing profiles: {e}", exc_info=True)
            raise RepositoryError(f"Error listing profiles: {str(e)}", operation="find_all")

    async def save(self, profile: Profile) -> Profile:
        """
        Save profile (create new or replace existing)

        Embedded entries without an ID are given a fresh ObjectId.

        Args:
            profile: Profile domain model to save

        Returns:
            Saved Profile domain model as stored
        """
        if not profile:
            raise ValueError("Profile cannot be None")

        profile_dict = self._profile_to_dict(profile)

        try:
            if profile.id:
                object_id = to_object_id(profile.id)
                if object_id is None:
                    raise ValueError(f"Invalid profile ID format: {profile.id}")

                replace_result = await self.profile_collection.replace_one(
                    {ProfileFields.MONGO_ID: object_id},
                    profile_dict,
                )
                if replace_result.matched_count == 0:
                    raise ValueError(f"Profile with ID {profile.id} not found")
            else:
                result = await self.profile_collection.insert_one(profile_dict)
                object_id = result.inserted_id

            # Fetch and return the stored document
            document = await self.profile_collection.find_one({ProfileFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error saving profile: {e}", exc_info=True)
            raise RepositoryError(f"Error saving profile: {str(e)}", operation="save")

        if document is None:
            raise RepositoryError("Profile was saved but could not be retrieved", operation="save")
        return self._document_to_profile(document)

    async def remove(self, profile: Profile) -> None:
        """Remove a profile"""
        object_id = to_object_id(profile.id)
        if object_id is None:
            return

        try:
            await self.profile_collection.delete_one({ProfileFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error removing profile: {e}", exc_info=True)
            raise RepositoryError(f"Error removing profile: {str(e)}", operation="remove")

    async def _find_one(self, query: Dict[str, Any], operation: str) -> Optional[Profile]:
        try:
            document = await self.profile_collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"Error finding profile: {e}", exc_info=True)
            raise RepositoryError(f"Error finding profile: {str(e)}", operation=operation)

        if document is None:
            return None
        return self._document_to_profile(document)

    def _document_to_profile(self, document: Dict[str, Any]) -> Profile:
        """
        Convert MongoDB document to Profile domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Profile domain model
        """
        if not document or ProfileFields.MONGO_ID not in document:
            raise RepositoryError("Invalid document: missing _id field")

        social_document = document.get(ProfileFields.SOCIAL)
        social = None
        if social_document:
            social = SocialLinks(**{
                attribute: social_document.get(key)
                for attribute, key in _SOCIAL_KEYS.items()
            })

        return Profile(
            id=str(document[ProfileFields.MONGO_ID]),
            user=str(document.get(ProfileFields.USER, "")),
            status=document.get(ProfileFields.STATUS, ""),
            skills=list(document.get(ProfileFields.SKILLS) or []),
            company=document.get(ProfileFields.COMPANY),
            website=document.get(ProfileFields.WEBSITE),
            location=document.get(ProfileFields.LOCATION),
            bio=document.get(ProfileFields.BIO),
            github_username=document.get(ProfileFields.GITHUB_USERNAME),
            social=social,
            experience=[
                Experience(
                    id=str(entry[ExperienceFields.MONGO_ID]),
                    title=entry.get(ExperienceFields.TITLE, ""),
                    company=entry.get(ExperienceFields.COMPANY, ""),
                    from_date=ensure_utc(entry.get(ExperienceFields.FROM)),
                    location=entry.get(ExperienceFields.LOCATION),
                    to_date=ensure_utc(entry.get(ExperienceFields.TO)),
                    current=bool(entry.get(ExperienceFields.CURRENT, False)),
                    description=entry.get(ExperienceFields.DESCRIPTION),
                )
                for entry in document.get(ProfileFields.EXPERIENCE) or []
            ],
            education=[
                Education(
                    id=str(entry[EducationFields.MONGO_ID]),
                    school=entry.get(EducationFields.SCHOOL, ""),
                    degree=entry.get(EducationFields.DEGREE, ""),
                    from_date=ensure_utc(entry.get(EducationFields.FROM)),
                    field_of_study=entry.get(EducationFields.FIELD_OF_STUDY),
                    to_date=ensure_utc(entry.get(EducationFields.TO)),
                    current=bool(entry.get(EducationFields.CURRENT, False)),
                    description=entry.get(EducationFields.DESCRIPTION),
                )
                for entry in document.get(ProfileFields.EDUCATION) or []
            ],
            date=ensure_utc(document.get(ProfileFields.DATE)),
        )

    def _profile_to_dict(self, profile: Profile) -> Dict[str, Any]:
        """
        Convert Profile domain model to MongoDB document (without _id)

        Args:
            profile: Profile domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        social = None
        if profile.social is not None:
            social = {
                key: getattr(profile.social, attribute)
                for attribute, key in _SOCIAL_KEYS.items()
                if getattr(profile.social, attribute) is not None
            }

        return {
            ProfileFields.USER: as_reference(profile.user),
            ProfileFields.STATUS: profile.status,
            ProfileFields.SKILLS: list(profile.skills),
            ProfileFields.COMPANY: profile.company,
            ProfileFields.WEBSITE: profile.website,
            ProfileFields.LOCATION: profile.location,
            ProfileFields.BIO: profile.bio,
            ProfileFields.GITHUB_USERNAME: profile.github_username,
            ProfileFields.SOCIAL: social,
            ProfileFields.EXPERIENCE: [
                {
                    ExperienceFields.MONGO_ID: ensure_object_id(entry.id),
                    ExperienceFields.TITLE: entry.title,
                    ExperienceFields.COMPANY: entry.company,
                    ExperienceFields.LOCATION: entry.location,
                    ExperienceFields.FROM: entry.from_date,
                    ExperienceFields.TO: entry.to_date,
                    ExperienceFields.CURRENT: entry.current,
                    ExperienceFields.DESCRIPTION: entry.description,
                }
                for entry in profile.experience
            ],
            ProfileFields.EDUCATION: [
                {
                    EducationFields.MONGO_ID: ensure_object_id(entry.id),
                    EducationFields.SCHOOL: entry.school,
                    EducationFields.DEGREE: entry.degree,
                    EducationFields.FIELD_OF_STUDY: entry.field_of_study,
                    EducationFields.FROM: entry.from_date,
                    EducationFields.TO: entry.to_date,
                    EducationFields.CURRENT: entry.current,
                    EducationFields.DESCRIPTION: entry.description,
                }
                for entry in profile.education
            ],
            ProfileFields.DATE: profile.date,
        }
