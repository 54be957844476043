# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import MessageResponse

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """Use case for deleting the caller's posts, profile and user record"""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.profile_repository = profile_repository
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> MessageResponse:
        removed_posts = await self.post_repository.remove_by_owner(user_id)

        profile = await self.profile_repository.find_by_owner(user_id)
        if profile is not None:
            await self.profile_repository.remove(profile)

        await self.user_repository.remove_by_id(user_id)
        logger.info(f"Deleted account {user_id} ({removed_posts} posts)")
        return MessageResponse(msg="User removed")
