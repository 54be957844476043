# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.profile_dto import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    ProfileResponse,
    ProfileUpsertRequest,
)
from ...application.dto.user_dto import AuthenticatedUser, MessageResponse
from ...application.use_cases.profile import (
    AddEducationUseCase,
    AddExperienceUseCase,
    DeleteAccountUseCase,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    RemoveEducationUseCase,
    RemoveExperienceUseCase,
    UpsertProfileUseCase,
)
from ...domain.exceptions import DevConnectError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import to_http_exception


router = APIRouter(tags=["profile"])


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> ProfileResponse:
    """
    Get the current user's profile

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        ProfileResponse with the owner's name and avatar joined in
    """
    container = get_container()
    get_profile_use_case = container.get(GetProfileByUserUseCase)

    try:
        return await get_profile_use_case.execute(user_id=current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=List[ProfileResponse])
async def list_profiles() -> List[ProfileResponse]:
    """List every profile (public)"""
    container = get_container()
    list_profiles_use_case = container.get(ListProfilesUseCase)

    try:
        return await list_profiles_use_case.execute()
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(user_id: str) -> ProfileResponse:
    """Get a user's profile by the user's ID (public)"""
    container = get_container()
    get_profile_use_case = container.get(GetProfileByUserUseCase)

    try:
        return await get_profile_use_case.execute(user_id=user_id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    request: ProfileUpsertRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> ProfileResponse:
    """
    Create the current user's profile, or update it if one exists

    Args:
        request: Profile fields; status and skills are required
        current_user: Current authenticated user (from dependency)

    Returns:
        ProfileResponse with the stored profile
    """
    container = get_container()
    upsert_profile_use_case = container.get(UpsertProfileUseCase)

    try:
        return await upsert_profile_use_case.execute(user_id=current_user.id, request=request)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> MessageResponse:
    """Delete the current user's profile, posts and account"""
    container = get_container()
    delete_account_use_case = container.get(DeleteAccountUseCase)

    try:
        return await delete_account_use_case.execute(user_id=current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    request: ExperienceCreateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> ProfileResponse:
    """Add an experience entry to the current user's profile"""
    container = get_container()
    add_experience_use_case = container.get(AddExperienceUseCase)

    try:
        return await add_experience_use_case.execute(user_id=current_user.id, request=request)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def remove_experience(
    exp_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> ProfileResponse:
    """Remove an experience entry from the current user's profile"""
    container = get_container()
    remove_experience_use_case = container.get(RemoveExperienceUseCase)

    try:
        return await remove_experience_use_case.execute(user_id=current_user.id, experience_id=exp_id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    request: EducationCreateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> ProfileResponse:
    """Add an education entry to the current user's profile"""
    container = get_container()
    add_education_use_case = container.get(AddEducationUseCase)

    try:
        return await add_education_use_case.execute(user_id=current_user.id, request=request)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def remove_education(
    edu_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> ProfileResponse:
    """Remove an education entry from the current user's profile"""
    container = get_container()
    remove_education_use_case = container.get(RemoveEducationUseCase)

    try:
        return await remove_education_use_case.execute(user_id=current_user.id, education_id=edu_id)
    except DevConnectError as exception:
        raise to_http_exception(exception)
