"""Tests for the functional API."""

import pytest

from searchtreelib import (
    Tree,
    TreeConfig,
    build_tree,
    insert_all,
    delete_all,
    drain_min,
    get_tree_stats,
)
from searchtreelib.testing import TreeInspector


class TestBuildTree:
    """Test building trees from iterables."""

    def test_build_from_list(self):
        tree = build_tree([17, 8, 3, 27, 22, 55, 83])

        assert len(tree) == 7
        assert tree.contains(3)
        assert tree.contains(55)
        assert not tree.contains(120)

    def test_build_ignores_repeats(self):
        tree = build_tree([2, 1, 2, 1])

        assert TreeInspector(tree).values() == [1, 2]

    def test_build_empty(self):
        tree = build_tree([])

        assert tree.is_empty()

    def test_build_with_config(self):
        config = TreeConfig.by_key(abs)
        tree = build_tree([-2, 1, 2], config=config)

        assert tree.config is config
        assert len(tree) == 2

    def test_build_with_kwargs(self):
        """Test that keyword options become the tree's config."""
        tree = build_tree(["b", "B", "a"], key=str.lower, check_invariants=True)

        assert tree.config.key is str.lower
        assert tree.config.check_invariants is True
        assert len(tree) == 2

    def test_build_from_generator(self):
        tree = build_tree(value * 3 % 11 for value in range(11))

        assert TreeInspector(tree).values() == list(range(11))


class TestBulkOperations:
    """Test insert_all, delete_all and drain_min."""

    def test_insert_all_counts_new_values(self):
        tree = Tree()

        assert insert_all(tree, [3, 1, 3, 2]) == 3
        assert insert_all(tree, [1, 4]) == 1

    def test_delete_all_counts_removed_values(self):
        tree = build_tree([5, 3, 8, 1])

        assert delete_all(tree, [3, 9, 5, 3]) == 2
        assert TreeInspector(tree).values() == [1, 8]

    def test_drain_min(self):
        tree = build_tree([17, 8, 3, 27, 22, 55, 83])

        assert drain_min(tree) == [3, 8, 17, 22, 27, 55, 83]
        assert tree.is_empty()
        assert drain_min(tree) == []


class TestTreeStats:
    """Test shape statistics."""

    def test_empty_tree(self):
        stats = get_tree_stats(Tree())

        assert stats == {
            'total_nodes': 0,
            'leaf_nodes': 0,
            'height': 0,
            'internal_nodes': 0,
            'degeneracy': 0,
        }

    def test_balanced_tree(self):
        stats = get_tree_stats(build_tree([2, 1, 3]))

        assert stats['total_nodes'] == 3
        assert stats['leaf_nodes'] == 2
        assert stats['internal_nodes'] == 1
        assert stats['height'] == 2
        assert stats['degeneracy'] == 1.0

    def test_degenerate_tree(self):
        """Test that sorted input produces a list-shaped tree."""
        stats = get_tree_stats(build_tree(range(4)))

        assert stats['height'] == 4
        assert stats['leaf_nodes'] == 1
        assert stats['degeneracy'] == pytest.approx(4 / 3)

    def test_stats_do_not_mutate(self):
        tree = build_tree([17, 8, 3])
        before = repr(tree)

        get_tree_stats(tree)

        assert repr(tree) == before
