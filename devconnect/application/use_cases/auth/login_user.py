# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.exceptions import AuthenticationError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse

logger = logging.getLogger(__name__)

INVALID_LOGIN_MESSAGE = "Invalid credentials"


class LoginUserUseCase:
    """Use case for exchanging email and password for an access token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Check credentials and sign a token for the matching user

        An unknown email and a wrong password fail the same way, so callers
        cannot tell which addresses are registered.

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.warning("Rejected login attempt")
            raise AuthenticationError(INVALID_LOGIN_MESSAGE)

        return TokenResponse(
            access_token=create_jwt_token({"sub": user.id or "", UserFields.EMAIL: user.email})
        )
