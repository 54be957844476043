"""
Unit tests for devconnect.domain.sub_collections
"""
from devconnect.domain.sub_collections import find_first, index_of, prepend, remove_first


def test_prepend_puts_item_first():
    items = ["b", "c"]
    assert prepend(items, "a") is items
    assert items == ["a", "b", "c"]


def test_index_of_first_match():
    assert index_of([1, 2, 3, 2], lambda x: x == 2) == 1
    assert index_of([1, 2, 3], lambda x: x == 9) is None


def test_find_first():
    assert find_first(["x", "yy", "zz"], lambda s: len(s) == 2) == "yy"
    assert find_first([], lambda s: True) is None


def test_remove_first_removes_one():
    items = [1, 2, 3, 2]
    assert remove_first(items, lambda x: x == 2) == 2
    assert items == [1, 3, 2]


def test_remove_first_without_match_leaves_list():
    items = [1, 2, 3]
    assert remove_first(items, lambda x: x == 9) is None
    assert items == [1, 2, 3]
