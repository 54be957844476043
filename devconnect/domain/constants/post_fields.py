"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    USER = "user"
    TEXT = "text"
    NAME = "name"
    AVATAR = "avatar"
    DATE = "date"
    LIKES = "likes"
    COMMENTS = "comments"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class LikeFields:
    """Field name constants for embedded Like documents"""
    USER = "user"


class CommentFields:
    """Field name constants for embedded Comment documents"""
    USER = "user"
    TEXT = "text"
    NAME = "name"
    AVATAR = "avatar"
    DATE = "date"

    MONGO_ID = "_id"
