"""Structural checks over search trees.

These helpers walk a tree with an explicit stack rather than recursion so
they work on degenerate trees of any depth. They only read the structure.
"""

from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from .node import Node
    from .tree import Tree


def iter_nodes_in_order(tree: 'Tree') -> Iterator['Node']:
    """Yield the nodes of ``tree`` in ascending order."""
    stack: List['Node'] = []
    current = tree.root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left.root
        node = stack.pop()
        yield node
        current = node.right.root


def in_order_values(tree: 'Tree') -> List[Any]:
    """Return every value held by ``tree`` in ascending order."""
    return [node.value for node in iter_nodes_in_order(tree)]


def count_nodes(tree: 'Tree') -> int:
    count = 0
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        if node.left.root is not None:
            stack.append(node.left.root)
        if node.right.root is not None:
            stack.append(node.right.root)
    return count


def tree_height(tree: 'Tree') -> int:
    """Return the number of nodes on the longest root-to-leaf path.

    An empty tree has height 0 and a single leaf has height 1.
    """
    height = 0
    stack: List[Tuple['Node', int]] = []
    if tree.root is not None:
        stack.append((tree.root, 1))
    while stack:
        node, depth = stack.pop()
        height = max(height, depth)
        for child in (node.left.root, node.right.root):
            if child is not None:
                stack.append((child, depth + 1))
    return height


def find_violations(tree: 'Tree') -> List[str]:
    """Check the search order of every node in ``tree``.

    Each node is checked against the open interval inherited from its
    ancestors, which catches both local misorderings and values placed
    under the wrong grandparent. Duplicates show up as violations because
    the bounds are strict.

    Args:
        tree: Tree to check

    Returns:
        List of human-readable violations (empty if the tree is valid)
    """
    sort_key = tree.config.sort_key
    violations = []
    # (node, lower bound value, upper bound value); None means unbounded
    stack: List[Tuple['Node', Optional['Node'], Optional['Node']]] = []
    if tree.root is not None:
        stack.append((tree.root, None, None))

    while stack:
        node, low, high = stack.pop()
        node_key = sort_key(node.value)

        if low is not None and not sort_key(low.value) < node_key:
            violations.append(
                f"{node.value!r} is not greater than ancestor {low.value!r}"
            )
        if high is not None and not node_key < sort_key(high.value):
            violations.append(
                f"{node.value!r} is not less than ancestor {high.value!r}"
            )

        if node.left.root is not None:
            stack.append((node.left.root, low, node))
        if node.right.root is not None:
            stack.append((node.right.root, node, high))

    return violations
