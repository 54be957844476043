# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.profile_dto import ProfileResponse


class GetProfileByUserUseCase:
    """Use case for getting the profile owned by a user, with owner details"""

    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> ProfileResponse:
        """
        Get the profile of user_id

        Raises:
            NotFoundError: If the user has no profile (malformed IDs included)
        """
        profile = await self.profile_repository.find_by_owner(user_id)
        if profile is None:
            raise NotFoundError("Profile not found", details={"user_id": user_id})

        owner = await self.user_repository.find_by_id(profile.user)
        return ProfileResponse.from_domain(profile, owner)


class ListProfilesUseCase:
    """Use case for listing every profile, with owner details"""

    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository

    async def execute(self) -> List[ProfileResponse]:
        profiles = await self.profile_repository.find_all()

        result = []
        for profile in profiles:
            owner = await self.user_repository.find_by_id(profile.user)
            result.append(ProfileResponse.from_domain(profile, owner))
        return result
