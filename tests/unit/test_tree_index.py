"""
Tests for TreeIndex lookups.

These verify id lookup, root paths and the parent/children/sibling
helpers built on them.
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from flowtree_core.domain.models import FlowNode
from flowtree_core.services.tree_index import TreeIndex


class TestFindById:
    """Test id lookup."""

    def test_root_is_found(self, sample_index):
        """find_by_id(root.id) returns the root."""
        assert sample_index.find_by_id(sample_index.root.id) is sample_index.root

    def test_unknown_id_returns_none(self, sample_index):
        """An unknown id is not-found, not an error."""
        assert sample_index.find_by_id("nonexistent") is None

    def test_none_id_returns_none(self, sample_index):
        """A missing id degrades to not-found."""
        assert sample_index.find_by_id(None) is None

    def test_deep_node(self, sample_index):
        """Leaves are reachable directly."""
        node = sample_index.find_by_id("n20")
        assert node.label == "L3-B2b"
        assert node.level == 3
        assert node.parent_id == "n7"


class TestPathFromRoot:
    """Test root-to-node paths."""

    def test_path_starts_at_root_and_ends_at_node(self, sample_index):
        """Every path runs from the root to the requested node."""
        for node in sample_index:
            path = sample_index.path_from_root(node.id)
            assert path[0] is sample_index.root
            assert path[-1] is node

    def test_path_length_is_level_plus_one(self, sample_index):
        """len(path) == level + 1 for every node."""
        for node in sample_index:
            assert len(sample_index.path_from_root(node.id)) == node.level + 1

    def test_path_labels(self, sample_index):
        """Path for an L3 node walks through its ancestors in order."""
        labels = [n.label for n in sample_index.path_from_root("n12")]
        assert labels == ["Root", "L1-A", "L2-A1", "L3-A1c"]

    def test_unknown_id_gives_empty_path(self, sample_index):
        """Unknown ids resolve to []."""
        assert sample_index.path_from_root("missing") == []

    def test_broken_parent_chain_gives_empty_path(self):
        """A dangling parent reference is treated as unresolvable."""
        nodes = {
            "r": FlowNode("r", "Root", 0, "#000"),
            "x": FlowNode("x", "Orphan", 2, "#fff", parent_id="gone"),
        }
        index = TreeIndex(nodes, "r")
        assert index.path_from_root("x") == []


class TestRelatives:
    """Test parent/children/sibling helpers."""

    def test_parent_of_root_is_none(self, sample_index):
        """The root has no parent."""
        assert sample_index.parent_of("n1") is None

    def test_parent_of_child(self, sample_index):
        """Parent is the second-to-last path entry."""
        assert sample_index.parent_of("n5").id == "n2"

    def test_children_keep_order(self, sample_index):
        """Children come back in declaration order."""
        assert [c.id for c in sample_index.children_of("n4")] == ["n10", "n11", "n12"]

    def test_children_of_leaf_is_empty(self, sample_index):
        """Leaves have no children."""
        assert sample_index.children_of("n10") == []

    def test_siblings_include_node(self, sample_index):
        """A node's layer contains itself and its siblings."""
        assert [s.id for s in sample_index.siblings_of("n6")] == ["n6", "n7"]

    def test_root_has_no_siblings(self, sample_index):
        """The root has no layer above it."""
        assert sample_index.siblings_of("n1") == []

    def test_missing_root_rejected(self):
        """Constructing an index without its root is a programming error."""
        with pytest.raises(KeyError):
            TreeIndex({}, "r")
