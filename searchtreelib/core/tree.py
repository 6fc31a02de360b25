"""Tree abstraction for SearchTreeLib.

A Tree is a slot that is either empty or owns exactly one root Node. Every
Node in turn owns two Trees, so any subtree, however deep, is itself a Tree
object. That is what makes in-place deletion simple: finding a value yields
the Tree slot holding it, and restructuring is done by rebinding that
slot's ``root``.

The tree is unbalanced. Operations descend iteratively over slots instead
of recursing, so a degenerate tree (for example one built from sorted input)
can grow as deep as memory allows.
"""

import logging
from typing import Any, Optional

from ..config import TreeConfig
from ..errors import (
    InvalidConfigurationError,
    InvariantViolationError,
    UnorderableValueError,
)
from .invariants import count_nodes, find_violations
from .node import Node

logger = logging.getLogger(__name__)


class Tree:
    """Unbalanced binary search tree holding a set of unique values.

    Values are compared with ``<`` (directly, or on ``config.key(value)``
    when a key function is configured); a value that is neither less nor
    greater than a stored value is considered already present.

    Example:
        >>> tree = Tree()
        >>> tree.insert(17)
        True
        >>> tree.insert(17)
        False
        >>> tree.contains(17)
        True
        >>> tree.delete(17)
        True
        >>> tree.pop_min() is None
        True
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Ordering and self-checking options (defaults to TreeConfig())

        Raises:
            InvalidConfigurationError: If the config fails validation
        """
        if config is None:
            config = TreeConfig()

        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigurationError(config_errors)

        self.config = config
        self.root: Optional[Node] = None

    @classmethod
    def new(cls, config: Optional[TreeConfig] = None) -> 'Tree':
        """Returns an empty tree."""
        return cls(config)

    @classmethod
    def leaf(cls, value: Any, config: Optional[TreeConfig] = None) -> 'Tree':
        """Returns a tree containing a single value."""
        tree = cls(config)
        tree._plant(value)
        return tree

    def _empty_subtree(self) -> 'Tree':
        # Config was validated when the outermost tree was built.
        subtree = type(self).__new__(type(self))
        subtree.config = self.config
        subtree.root = None
        return subtree

    def _plant(self, value: Any) -> None:
        self.root = Node(value, self._empty_subtree(), self._empty_subtree())

    def is_empty(self) -> bool:
        return self.root is None

    # Lookup

    def _compare(self, value: Any, key: Any, node: Node) -> int:
        """Three-way comparison of ``key`` against the key of ``node``.

        Returns:
            -1 if key orders before the node, 1 if after, 0 if equal

        Raises:
            UnorderableValueError: If the keys cannot be ordered
        """
        other = self.config.sort_key(node.value)
        try:
            if key < other:
                return -1
            if other < key:
                return 1
        except TypeError as e:
            raise UnorderableValueError(value, node.value, e) from e
        return 0

    def _locate(self, value: Any) -> 'Tree':
        """Return the slot that holds ``value``, or the empty slot where it belongs."""
        key = self.config.sort_key(value)
        slot = self
        while slot.root is not None:
            order = slot._compare(value, key, slot.root)
            if order < 0:
                slot = slot.root.left
            elif order > 0:
                slot = slot.root.right
            else:
                break
        return slot

    def _find(self, value: Any) -> Optional['Tree']:
        """Return the subtree whose root holds ``value``, or None.

        The returned Tree is part of this tree's structure, so mutating it
        mutates this tree.
        """
        slot = self._locate(value)
        if slot.root is None:
            return None
        return slot

    def contains(self, value: Any) -> bool:
        """Returns True if and only if ``value`` belongs to the tree."""
        return self._locate(value).root is not None

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    # Mutation

    def insert(self, value: Any) -> bool:
        """Inserts ``value`` into the tree.

        Args:
            value: Value to add

        Returns:
            False iff the value was already contained in the tree

        Raises:
            UnorderableValueError: If value cannot be ordered against the
                values on its search path (the tree is left unchanged)
        """
        slot = self._locate(value)
        if slot.root is not None:
            logger.debug("insert %r: already present", value)
            return False

        slot._plant(value)
        self._after_mutation("insert", value)
        return True

    def delete(self, value: Any) -> bool:
        """Deletes ``value`` from the tree.

        A leaf is simply removed and a node with one child is replaced by
        that child. A node with two children takes over the smallest value
        of its right subtree, which is then popped from that subtree.

        Returns:
            True if a value was removed, False if it was not in the tree
        """
        target = self._find(value)
        if target is None:
            logger.debug("delete %r: not present", value)
            return False

        node = target.root
        if node.has_both_children():
            node.value = node.right._pop_min()
        else:
            child = node.only_child()
            target.root = child.root if child is not None else None

        self._after_mutation("delete", value)
        return True

    def pop_min(self) -> Optional[Any]:
        """Removes and returns the smallest value, or None if the tree is empty."""
        if self.root is None:
            return None

        value = self._pop_min()
        self._after_mutation("pop_min", value)
        return value

    def _pop_min(self) -> Any:
        # Caller guarantees the tree is not empty.
        slot = self
        while slot.root.left.root is not None:
            slot = slot.root.left
        node = slot.root
        # The minimum has no left child; its right subtree moves up.
        slot.root = node.right.root
        return node.value

    def _after_mutation(self, operation: str, value: Any) -> None:
        logger.debug("%s %r", operation, value)
        if not self.config.check_invariants:
            return

        violations = find_violations(self)
        if violations:
            logger.debug("%s %r broke the search order: %s", operation, value, violations)
            raise InvariantViolationError(violations)

    # Python data model

    def __len__(self) -> int:
        return count_nodes(self)

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        """Nested representation for debugging."""
        if self.root is None:
            return "Tree()"
        return f"Tree({self.root!r})"
