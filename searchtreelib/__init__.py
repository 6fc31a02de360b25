"""SearchTreeLib - Unbalanced Binary Search Tree.

SearchTreeLib provides a generic, in-memory binary search tree holding a set
of unique, ordered values, with insertion, membership lookup, deletion and
extract-min.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtreelib import Tree

    tree = Tree()
    tree.insert(17)
    tree.contains(17)
    tree.delete(17)
━━━━━━━━━━━━━━━━━━━━━━━━━━

The tree performs no balancing and is not thread-safe; wrap it in a lock
if several threads share one instance.
"""

import logging

__version__ = "0.1.0"

from .core.node import Node
from .core.tree import Tree
from .config import TreeConfig
from .errors import (
    SearchTreeError,
    InvalidConfigurationError,
    UnorderableValueError,
    InvariantViolationError,
)
from .api import (
    build_tree,
    insert_all,
    delete_all,
    drain_min,
    get_tree_stats,
)

# Library code only emits DEBUG records; applications decide where they go.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    'Node',
    'Tree',
    # Config
    'TreeConfig',
    # Errors
    'SearchTreeError',
    'InvalidConfigurationError',
    'UnorderableValueError',
    'InvariantViolationError',
    # API
    'build_tree',
    'insert_all',
    'delete_all',
    'drain_min',
    'get_tree_stats',
]
