# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.security import decode_jwt_token
from ....domain.exceptions import AuthenticationError
from ...dto.user_dto import AuthenticatedUser

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL_MESSAGE = "No token, authorization denied"
INVALID_CREDENTIAL_MESSAGE = "Token is not valid"


class AuthenticateTokenUseCase:
    """
    Resolve a bearer token to the identity it was issued for.

    Only the token itself is inspected; no repository is consulted.
    """

    def execute(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Verify a token and return the authenticated identity

        Args:
            token: Raw token taken from the request, or None when absent

        Returns:
            AuthenticatedUser carrying the user ID from the token subject

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        if not token:
            raise AuthenticationError(
                MISSING_CREDENTIAL_MESSAGE,
                details={"reason": "missing_credential"},
            )

        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            logger.warning(f"Rejected token: {exception}")
            raise AuthenticationError(
                INVALID_CREDENTIAL_MESSAGE,
                details={"reason": "invalid_credential"},
            )

        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise AuthenticationError(
                INVALID_CREDENTIAL_MESSAGE,
                details={"reason": "invalid_credential"},
            )

        return AuthenticatedUser(id=user_id)
