"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    HASHED_PASSWORD = "password"
    AVATAR = "avatar"
    DATE = "date"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
