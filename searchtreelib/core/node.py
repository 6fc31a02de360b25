"""Node record for SearchTreeLib.

A Node is a plain data container: one value and the two subtrees it owns.
All ordering decisions live in Tree, which is the only code that creates
or relinks nodes.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .tree import Tree


@dataclass(repr=False, eq=False)
class Node:
    """A value together with the left and right subtrees it owns.

    Every value in ``left`` orders strictly before ``value`` and every value
    in ``right`` orders strictly after it. Subtrees are never shared between
    nodes.
    """

    value: Any
    left: 'Tree'
    right: 'Tree'

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left.is_empty() and self.right.is_empty()

    def has_both_children(self) -> bool:
        return not self.left.is_empty() and not self.right.is_empty()

    def only_child(self) -> Optional['Tree']:
        """Return the sole non-empty subtree, or None.

        Returns None both for leaves and for nodes with two children.
        """
        if self.left.is_empty() and not self.right.is_empty():
            return self.right
        if self.right.is_empty() and not self.left.is_empty():
            return self.left
        return None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Node({self.value!r}, {self.left!r}, {self.right!r})"
