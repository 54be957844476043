from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase, ListUserPostsUseCase
from .get_post import GetPostUseCase
from .edit_post import EditPostUseCase
from .delete_post import DeletePostUseCase
from .like_post import LikePostUseCase, UnlikePostUseCase
from .comment_post import AddCommentUseCase, EditCommentUseCase, DeleteCommentUseCase

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "ListUserPostsUseCase",
    "GetPostUseCase",
    "EditPostUseCase",
    "DeletePostUseCase",
    "LikePostUseCase",
    "UnlikePostUseCase",
    "AddCommentUseCase",
    "EditCommentUseCase",
    "DeleteCommentUseCase",
]
