"""Test fixtures for SearchTreeLib consumers.

These fixtures provide read-only access to tree structure for testing
purposes without making traversal part of the Tree API.
"""

from typing import Any, List

from ..core.tree import Tree
from ..core.invariants import find_violations, in_order_values, tree_height
from ..errors import InvariantViolationError


class TreeInspector:
    """Public test fixture for verifying tree structure.

    Example:
        tree = build_tree([17, 8, 3, 27])
        inspector = TreeInspector(tree)

        assert inspector.values() == [3, 8, 17, 27]
        inspector.assert_valid()
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree to inspect.

        Args:
            tree: Tree under test; the inspector never modifies it
        """
        self._tree = tree

    def values(self) -> List[Any]:
        """Return all values in ascending order."""
        return in_order_values(self._tree)

    def height(self) -> int:
        return tree_height(self._tree)

    def root_value(self) -> Any:
        """Return the root's value, or None for an empty tree."""
        if self._tree.root is None:
            return None
        return self._tree.root.value

    def violations(self) -> List[str]:
        return find_violations(self._tree)

    def assert_valid(self) -> None:
        """Raise InvariantViolationError if the search order is broken.

        Bounds are strict, so duplicate values also count as violations.
        """
        violations = self.violations()
        if violations:
            raise InvariantViolationError(violations)
