"""Tests for the shallow clone helper."""

from utils.objects import shallow_clone


class _Node:
    kind = "class-level"

    def __init__(self):
        self.name = "alpha"
        self.tags = ["a"]


def test_shallow_clone_mapping():
    """Mappings are copied one level deep."""
    original = {"a": 1, "nested": {"b": 2}}
    clone = shallow_clone(original)
    assert clone == original
    assert clone is not original
    assert clone["nested"] is original["nested"]
    clone["a"] = 5
    assert original["a"] == 1


def test_shallow_clone_object_own_attributes():
    """Objects contribute only their instance attributes."""
    node = _Node()
    clone = shallow_clone(node)
    assert clone == {"name": "alpha", "tags": ["a"]}
    assert clone["tags"] is node.tags


def test_shallow_clone_none():
    """None clones to an empty dict."""
    assert shallow_clone(None) == {}
