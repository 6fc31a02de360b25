"""Configuration system for SearchTreeLib.

This module defines how users specify the ordering a tree uses and how much
self-checking it performs after mutations.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional


@dataclass
class TreeConfig:
    """Complete configuration for a search tree.

    A single config object is shared by a tree and every subtree it owns,
    so all comparisons within one tree use the same ordering.
    """

    # Ordering
    key: Optional[Callable[[Any], Any]] = None  # Order by key(value) instead of value

    # Self-checking
    check_invariants: bool = False  # Re-verify search order after every mutation

    # Convenience constructors for common configurations

    @classmethod
    def by_key(cls, key: Callable[[Any], Any]) -> 'TreeConfig':
        """Create config that orders values by ``key(value)``.

        Args:
            key: Function mapping a stored value to its sort key

        Returns:
            TreeConfig ordering by the given key
        """
        return cls(key=key)

    @classmethod
    def debug(cls, key: Optional[Callable[[Any], Any]] = None) -> 'TreeConfig':
        """Create config that verifies the tree after every mutation.

        Args:
            key: Optional ordering key

        Returns:
            TreeConfig with invariant checking enabled
        """
        return cls(key=key, check_invariants=True)

    def sort_key(self, value: Any) -> Any:
        """Return the object comparisons are performed on."""
        if self.key is None:
            return value
        return self.key(value)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.key is not None and not callable(self.key):
            errors.append("key must be callable")

        if not isinstance(self.check_invariants, bool):
            errors.append("check_invariants must be a bool")

        return errors
