# Standard library imports
from typing import Any, Dict, Mapping

# Local application imports
from .exceptions import ValidationError


def is_blank(value: Any) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(values: Mapping[str, Any], messages: Dict[str, str]) -> None:
    """
    Check that every field named in messages has a non-blank value.

    Args:
        values: Field name -> supplied value
        messages: Field name -> error message when the field is missing

    Raises:
        ValidationError: Listing every missing field, in the order of messages
    """
    errors = [
        {"param": name, "msg": message}
        for name, message in messages.items()
        if is_blank(values.get(name))
    ]
    if errors:
        raise ValidationError(errors)
