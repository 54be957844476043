"""Use cases editing the experience and education entries of the caller's profile."""

# Standard library imports
import logging

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.profile import Education, Experience, Profile
from ....domain.exceptions import NotFoundError
from ....domain.sub_collections import prepend, remove_first
from ....domain.validation import require_fields
from ...dto.profile_dto import EducationCreateRequest, ExperienceCreateRequest, ProfileResponse

logger = logging.getLogger(__name__)


async def load_own_profile(profile_repository: ProfileRepository, user_id: str) -> Profile:
    """
    Load the profile owned by user_id

    Raises:
        NotFoundError: If the user has not created a profile yet
    """
    profile = await profile_repository.find_by_owner(user_id)
    if profile is None:
        raise NotFoundError("There is no profile for this user")
    return profile


class AddExperienceUseCase:
    """Use case for adding an experience entry to the caller's profile"""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def execute(self, user_id: str, request: ExperienceCreateRequest) -> ProfileResponse:
        """
        Insert a new experience entry at the front of the profile's experience

        Raises:
            ValidationError: If title, company or from date is missing
            NotFoundError: If the caller has no profile
        """
        require_fields(
            {"title": request.title, "company": request.company, "from": request.from_date},
            {
                "title": "Title is required",
                "company": "Company is required",
                "from": "From date is required",
            },
        )
        profile = await load_own_profile(self.profile_repository, user_id)

        entry = Experience(
            id=None,  # Assigned by repository
            title=request.title.strip(),
            company=request.company.strip(),
            from_date=request.from_date,
            location=request.location,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        prepend(profile.experience, entry)
        saved_profile = await self.profile_repository.save(profile)
        logger.info(f"User {user_id} added experience to profile {saved_profile.id}")
        return ProfileResponse.from_domain(saved_profile)


class RemoveExperienceUseCase:
    """Use case for removing an experience entry from the caller's profile"""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def execute(self, user_id: str, experience_id: str) -> ProfileResponse:
        """
        Remove the experience entry with experience_id

        Raises:
            NotFoundError: If the caller has no profile or no such entry
        """
        profile = await load_own_profile(self.profile_repository, user_id)

        removed = remove_first(profile.experience, lambda entry: entry.id == experience_id)
        if removed is None:
            raise NotFoundError("Experience not found", details={"experience_id": experience_id})

        saved_profile = await self.profile_repository.save(profile)
        logger.info(f"User {user_id} removed experience {experience_id}")
        return ProfileResponse.from_domain(saved_profile)


class AddEducationUseCase:
    """Use case for adding an education entry to the caller's profile"""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def execute(self, user_id: str, request: EducationCreateRequest) -> ProfileResponse:
        """
        Insert a new education entry at the front of the profile's education

        Raises:
            ValidationError: If school, degree or from date is missing
            NotFoundError: If the caller has no profile
        """
        require_fields(
            {"school": request.school, "degree": request.degree, "from": request.from_date},
            {
                "school": "School is required",
                "degree": "Degree is required",
                "from": "From date is required",
            },
        )
        profile = await load_own_profile(self.profile_repository, user_id)

        entry = Education(
            id=None,  # Assigned by repository
            school=request.school.strip(),
            degree=request.degree.strip(),
            from_date=request.from_date,
            field_of_study=request.field_of_study,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        prepend(profile.education, entry)
        saved_profile = await self.profile_repository.save(profile)
        logger.info(f"User {user_id} added education to profile {saved_profile.id}")
        return ProfileResponse.from_domain(saved_profile)


class RemoveEducationUseCase:
    """Use case for removing an education entry from the caller's profile"""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def execute(self, user_id: str, education_id: str) -> ProfileResponse:
        """
        Remove the education entry with education_id

        An unknown ID never removes some other entry.

        Raises:
            NotFoundError: If the caller has no profile or no such entry
        """
        profile = await load_own_profile(self.profile_repository, user_id)

        removed = remove_first(profile.education, lambda entry: entry.id == education_id)
        if removed is None:
            raise NotFoundError("Education not found", details={"education_id": education_id})

        saved_profile = await self.profile_repository.save(profile)
        logger.info(f"User {user_id} removed education {education_id}")
        return ProfileResponse.from_domain(saved_profile)
