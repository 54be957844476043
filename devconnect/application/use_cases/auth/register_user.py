# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....domain.exceptions import ConflictError
from ....core.security import hash_password, create_jwt_token, gravatar_url
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import UserRegistrationRequest, TokenResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> TokenResponse:
        """
        Register a new user and sign them in

        Args:
            request: Registration request with user details

        Returns:
            TokenResponse with an access token for the new user

        Raises:
            ConflictError: If user with email already exists
        """
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError("User already exists")

        new_user = User(
            id=None,  # Will be set by repository
            name=request.name.strip(),
            email=request.email,
            hashed_password=hash_password(request.password),
            avatar=gravatar_url(request.email),
            date=utc_now(),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")

        token = create_jwt_token({
            "sub": saved_user.id or "",
            UserFields.EMAIL: saved_user.email,
        })
        return TokenResponse(access_token=token)
