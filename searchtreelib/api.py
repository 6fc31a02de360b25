"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common bulk
operations. These functions wrap the Tree methods for ease of use when
working with whole collections of values.
"""

from typing import Any, Dict, Iterable, List, Optional

from .config import TreeConfig
from .core.tree import Tree
from .core.invariants import iter_nodes_in_order, tree_height


def build_tree(
    values: Iterable[Any],
    config: Optional[TreeConfig] = None,
    **kwargs
) -> Tree:
    """Build a tree by inserting values in iteration order.

    Insertion order determines the shape of the tree: sorted input gives a
    degenerate, list-shaped tree.

    Args:
        values: Values to insert; repeats are ignored
        config: Tree configuration (built from kwargs when omitted)
        **kwargs: Configuration options (key, check_invariants)

    Returns:
        New Tree holding every distinct value

    Example:
        >>> tree = build_tree([17, 8, 3, 27, 22, 55, 83])
        >>> tree.contains(55)
        True
    """
    if config is None:
        config = _build_config_from_kwargs(**kwargs)

    tree = Tree(config)
    insert_all(tree, values)
    return tree


def insert_all(tree: Tree, values: Iterable[Any]) -> int:
    """Insert every value into tree.

    Returns:
        Number of values that were newly added

    Example:
        >>> tree = Tree()
        >>> insert_all(tree, [3, 1, 3, 2])
        3
    """
    added = 0
    for value in values:
        if tree.insert(value):
            added += 1
    return added


def delete_all(tree: Tree, values: Iterable[Any]) -> int:
    """Delete every value from tree.

    Returns:
        Number of values that were present and removed
    """
    removed = 0
    for value in values:
        if tree.delete(value):
            removed += 1
    return removed


def drain_min(tree: Tree) -> List[Any]:
    """Pop values from tree, smallest first, until it is empty.

    The tree is consumed; this is extract-min in bulk, not a traversal.

    Returns:
        The popped values in strictly increasing order

    Example:
        >>> drain_min(build_tree([5, 1, 3]))
        [1, 3, 5]
    """
    drained = []
    while not tree.is_empty():
        drained.append(tree.pop_min())
    return drained


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about the shape of a tree.

    Args:
        tree: Tree to inspect (not modified)

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['height']
        2
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': tree_height(tree),
    }

    for node in iter_nodes_in_order(tree):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Ratio of actual height to the height of a perfectly balanced tree
    stats['degeneracy'] = (
        stats['height'] / stats['total_nodes'].bit_length()
        if stats['total_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _build_config_from_kwargs(**kwargs) -> TreeConfig:
    """Build TreeConfig from keyword arguments.

    Args:
        **kwargs: Configuration options

    Returns:
        TreeConfig instance
    """
    config = TreeConfig()

    # Apply kwargs that name config attributes
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    return config
