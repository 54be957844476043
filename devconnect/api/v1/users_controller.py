# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, TokenResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...domain.exceptions import DevConnectError
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["users"])


@router.post("", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> TokenResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        TokenResponse with an access token for the new user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except DevConnectError as exception:
        raise to_http_exception(exception)
