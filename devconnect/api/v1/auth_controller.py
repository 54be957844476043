# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.auth_dto import UserLoginRequest, TokenResponse
from ...application.dto.user_dto import AuthenticatedUser, UserResponse
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...domain.exceptions import DevConnectError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import to_http_exception


router = APIRouter(tags=["authentication"])


@router.post("", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        TokenResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=UserResponse)
async def get_me(current_user: AuthenticatedUser = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with user information
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)
