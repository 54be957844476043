# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.post_dto import (
    CommentResponse,
    CommentTextRequest,
    LikeResponse,
    PostResponse,
    PostTextRequest,
)
from ...application.dto.user_dto import AuthenticatedUser, MessageResponse
from ...application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeleteCommentUseCase,
    DeletePostUseCase,
    EditCommentUseCase,
    EditPostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
    UnlikePostUseCase,
)
from ...domain.exceptions import DevConnectError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import to_http_exception


router = APIRouter(tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostTextRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> PostResponse:
    """
    Create a post as the current user

    Args:
        request: Post text
        current_user: Current authenticated user (from dependency)

    Returns:
        PostResponse with the created post
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)

    try:
        return await create_post_use_case.execute(user_id=current_user.id, text=request.text)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=List[PostResponse])
async def list_posts(
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> List[PostResponse]:
    """List all posts, newest first"""
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)

    try:
        return await list_posts_use_case.execute()
    except DevConnectError as exception:
        raise to_http_exception(exception)


# Declared before "/{post_id}" so "me" is not read as a post ID
@router.get("/me", response_model=List[PostResponse])
async def list_my_posts(
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> List[PostResponse]:
    """List the current user's posts, newest first"""
    container = get_container()
    list_user_posts_use_case = container.get(ListUserPostsUseCase)

    try:
        return await list_user_posts_use_case.execute(user_id=current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> PostResponse:
    """
    Get a post by ID

    Args:
        post_id: Post ID
        current_user: Current authenticated user (from dependency)

    Returns:
        PostResponse with the post's likes and comments
    """
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)

    try:
        return await get_post_use_case.execute(post_id=post_id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.put("/like/{post_id}", response_model=List[LikeResponse])
async def like_post(
    post_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> List[LikeResponse]:
    """Like a post, returning its updated likes"""
    container = get_container()
    like_post_use_case = container.get(LikePostUseCase)

    try:
        return await like_post_use_case.execute(post_id=post_id, user_id=current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.put("/unlike/{post_id}", response_model=List[LikeResponse])
async def unlike_post(
    post_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> List[LikeResponse]:
    """Withdraw a like from a post, returning its updated likes"""
    container = get_container()
    unlike_post_use_case = container.get(UnlikePostUseCase)

    try:
        return await unlike_post_use_case.execute(post_id=post_id, user_id=current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.post("/comment/{post_id}", response_model=List[CommentResponse])
async def add_comment(
    post_id: str,
    request: CommentTextRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> List[CommentResponse]:
    """
    Comment on a post

    Args:
        post_id: Post ID
        request: Comment text
        current_user: Current authenticated user (from dependency)

    Returns:
        The post's comments, newest first
    """
    container = get_container()
    add_comment_use_case = container.get(AddCommentUseCase)

    try:
        return await add_comment_use_case.execute(
            post_id=post_id,
            user_id=current_user.id,
            text=request.text,
        )
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.put("/comment/{post_id}/{comment_id}", response_model=List[CommentResponse])
async def edit_comment(
    post_id: str,
    comment_id: str,
    request: CommentTextRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> List[CommentResponse]:
    """Edit the text of one of the current user's comments"""
    container = get_container()
    edit_comment_use_case = container.get(EditCommentUseCase)

    try:
        return await edit_comment_use_case.execute(
            post_id=post_id,
            comment_id=comment_id,
            user_id=current_user.id,
            text=request.text,
        )
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.delete("/comment/{post_id}/{comment_id}", response_model=List[CommentResponse])
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> List[CommentResponse]:
    """Delete one of the current user's comments"""
    container = get_container()
    delete_comment_use_case = container.get(DeleteCommentUseCase)

    try:
        return await delete_comment_use_case.execute(
            post_id=post_id,
            comment_id=comment_id,
            user_id=current_user.id,
        )
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.put("/{post_id}", response_model=PostResponse)
async def edit_post(
    post_id: str,
    request: PostTextRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> PostResponse:
    """Edit the text of one of the current user's posts"""
    container = get_container()
    edit_post_use_case = container.get(EditPostUseCase)

    try:
        return await edit_post_use_case.execute(
            post_id=post_id,
            user_id=current_user.id,
            text=request.text,
        )
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> MessageResponse:
    """
    Delete one of the current user's posts

    Args:
        post_id: Post ID
        current_user: Current authenticated user (from dependency)

    Returns:
        MessageResponse confirming removal
    """
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)

    try:
        return await delete_post_use_case.execute(post_id=post_id, user_id=current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)
