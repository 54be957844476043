# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Like:
    """A like left on a post. Only the liking user is recorded."""
    user: str

    def __post_init__(self) -> None:
        if not self.user:
            raise ValueError("Like user is required")


@dataclass
class Comment:
    """
    Comment embedded in a post.

    name and avatar are a snapshot of the author taken when the comment was
    written; later profile edits do not reach them.
    """
    id: Optional[str]
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user:
            raise ValueError("Comment user is required")
        if not self.text or not self.text.strip():
            raise ValueError("Comment text is required")


@dataclass
class Post:
    """
    Pure domain model for Post aggregate.

    Likes and comments are stored most-recent-first and are always persisted
    together with the post.
    """
    id: Optional[str]
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: Optional[datetime] = None
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user:
            raise ValueError("Post owner is required")
        if not self.text or not self.text.strip():
            raise ValueError("Post text is required")

    def is_owned_by(self, user_id: str) -> bool:
        return self.user == user_id

    def is_liked_by(self, user_id: str) -> bool:
        return any(like.user == user_id for like in self.likes)
