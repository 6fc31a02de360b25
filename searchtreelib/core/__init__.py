"""Core data structures of SearchTreeLib."""

from .node import Node
from .tree import Tree
from .invariants import (
    iter_nodes_in_order,
    in_order_values,
    count_nodes,
    tree_height,
    find_violations,
)

__all__ = [
    'Node',
    'Tree',
    'iter_nodes_in_order',
    'in_order_values',
    'count_nodes',
    'tree_height',
    'find_violations',
]
