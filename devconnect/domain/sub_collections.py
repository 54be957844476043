"""
Helpers for editing the ordered sub-collections embedded in an aggregate
(post likes/comments, profile experience/education).

Entries are kept most-recent-first: new entries go to the front and removal
always targets exactly one position.
"""

# Standard library imports
from typing import Callable, List, Optional, TypeVar


T = TypeVar("T")


def prepend(items: List[T], item: T) -> List[T]:
    """Insert item at the front of items (in place) and return items."""
    items.insert(0, item)
    return items


def index_of(items: List[T], predicate: Callable[[T], bool]) -> Optional[int]:
    """Position of the first element satisfying predicate, or None."""
    return next((index for index, item in enumerate(items) if predicate(item)), None)


def find_first(items: List[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """First element satisfying predicate, or None."""
    index = index_of(items, predicate)
    return None if index is None else items[index]


def remove_first(items: List[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """
    Remove the first element satisfying predicate.

    Returns the removed element, or None when nothing matched; in that case
    items is left untouched.
    """
    index = index_of(items, predicate)
    if index is None:
        return None
    return items.pop(index)
