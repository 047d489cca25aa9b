"""
Unit tests for TermTree validation and nested lookup.
"""

import pytest
from pydantic import ValidationError

from i18n_service import TermLookup, TermTree


@pytest.fixture
def tree() -> TermTree:
    return TermTree.from_data({
        "user": {"name": "Name", "address": {"city": "City"}},
        "empty": "",
        "title": "Title",
    })


class TestLookup:
    """Test dotted-key descent."""

    def test_top_level_leaf(self, tree: TermTree):
        assert tree.lookup("title") == TermLookup(found=True, value="Title")

    def test_nested_leaf(self, tree: TermTree):
        assert tree.lookup("user.name").value == "Name"

    def test_deeply_nested_leaf(self, tree: TermTree):
        assert tree.lookup("user.address.city").value == "City"

    def test_missing_segment(self, tree: TermTree):
        result = tree.lookup("user.phone")
        assert result.found is False
        assert result.value is None

    def test_missing_root(self, tree: TermTree):
        assert tree.lookup("nothing.here").found is False

    def test_path_through_leaf_is_missing(self, tree: TermTree):
        """Descending below a string leaf does not index into the string."""
        assert tree.lookup("title.0").found is False

    def test_subtree_is_not_a_term(self, tree: TermTree):
        assert tree.lookup("user").found is False

    def test_empty_string_leaf_is_found(self, tree: TermTree):
        assert tree.lookup("empty") == TermLookup(found=True, value="")

    def test_empty_segment(self, tree: TermTree):
        assert tree.lookup("user.").found is False

    def test_missing_helper(self):
        assert TermLookup.missing() == TermLookup(found=False, value=None)


class TestValidation:
    """Test construction from parsed JSON."""

    def test_empty_object_is_valid(self):
        assert list(TermTree.from_data({}).keys()) == []

    def test_nested_values_become_trees(self, tree: TermTree):
        assert isinstance(tree.root["user"], TermTree)

    @pytest.mark.parametrize("data", [
        ["not", "an", "object"],
        "just a string",
        None,
        {"count": 3},
        {"flag": True},
        {"user": {"name": None}},
        {"items": ["a", "b"]},
    ])
    def test_invalid_shapes_rejected(self, data):
        with pytest.raises(ValidationError):
            TermTree.from_data(data)


class TestKeys:
    """Test flattening of leaf keys."""

    def test_keys_are_dotted_paths(self, tree: TermTree):
        assert sorted(tree.keys()) == ["empty", "title", "user.address.city", "user.name"]
