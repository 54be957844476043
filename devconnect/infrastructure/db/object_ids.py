# Standard library imports
from typing import Optional, Union

# External package imports
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Parse a string ID, returning None when it is not a valid ObjectId"""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def ensure_object_id(value: Optional[str]) -> ObjectId:
    """Parse a string ID, generating a fresh ObjectId for new entries"""
    return to_object_id(value) or ObjectId()


def as_reference(value: str) -> Union[ObjectId, str]:
    """Store a reference to another document as ObjectId when it parses as one"""
    return to_object_id(value) or value
