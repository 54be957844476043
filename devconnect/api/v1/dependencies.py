# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.authenticate_token import AuthenticateTokenUseCase
from ...application.dto.user_dto import AuthenticatedUser
from ...domain.exceptions import AuthenticationError
from ...di.container import get_container
from .errors import to_http_exception


LEGACY_TOKEN_HEADER = "x-auth-token"

security_scheme = HTTPBearer(auto_error=False)
legacy_token_scheme = APIKeyHeader(name=LEGACY_TOKEN_HEADER, auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    legacy_token: Optional[str] = Depends(legacy_token_scheme),
) -> AuthenticatedUser:
    """
    FastAPI dependency gating private routes

    The token is read from "Authorization: Bearer <token>", falling back to
    the x-auth-token header.

    Args:
        credentials: HTTP Bearer token credentials, if sent
        legacy_token: Value of the x-auth-token header, if sent

    Returns:
        AuthenticatedUser with the user ID the token was issued for

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    token = credentials.credentials if credentials is not None else legacy_token

    container = get_container()
    authenticate_token_use_case = container.get(AuthenticateTokenUseCase)

    try:
        return authenticate_token_use_case.execute(token)
    except AuthenticationError as exception:
        raise to_http_exception(exception)
