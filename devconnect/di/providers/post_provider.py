from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.post import (
    CreatePostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
    GetPostUseCase,
    EditPostUseCase,
    DeletePostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    AddCommentUseCase,
    EditCommentUseCase,
    DeleteCommentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post, like and comment use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        # Use cases that only need the post repository
        for use_case_class in (
            ListPostsUseCase,
            ListUserPostsUseCase,
            GetPostUseCase,
            EditPostUseCase,
            DeletePostUseCase,
            LikePostUseCase,
            UnlikePostUseCase,
            EditCommentUseCase,
            DeleteCommentUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    post_repository=container.get(PostRepository)
                )
            )

        # Use cases that snapshot the author's name and avatar
        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            AddCommentUseCase,
            lambda: AddCommentUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )
