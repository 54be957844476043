# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for loading the authenticated user's record"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get the current user

        Args:
            user_id: ID resolved from the access token

        Returns:
            UserResponse with user information (no password)

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        return UserResponse(
            id=user.id or "",
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            date=user.date,
        )
