from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ...domain.models.post import Comment, Like, Post


class PostTextRequest(BaseModel):
    """DTO for creating or editing a post"""
    text: Optional[str] = None


class CommentTextRequest(BaseModel):
    """DTO for creating or editing a comment"""
    text: Optional[str] = None


class LikeResponse(BaseModel):
    """DTO for a like"""
    user: str

    @classmethod
    def from_domain(cls, like: Like) -> "LikeResponse":
        return cls(user=like.user)


class CommentResponse(BaseModel):
    """DTO for a comment"""
    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: Optional[datetime] = None

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id or "",
            user=comment.user,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            date=comment.date,
        )


class PostResponse(BaseModel):
    """DTO for a post with its likes and comments"""
    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: Optional[datetime] = None
    likes: List[LikeResponse] = []
    comments: List[CommentResponse] = []

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id or "",
            user=post.user,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            date=post.date,
            likes=[LikeResponse.from_domain(like) for like in post.likes],
            comments=[CommentResponse.from_domain(comment) for comment in post.comments],
        )
