"""Exceptions raised by SearchTreeLib.

Absence is never an error: lookups and deletions of missing values report
``False`` and extracting from an empty tree reports ``None``. The exceptions
here cover misuse that the type system of a statically typed language would
have rejected up front.
"""

from typing import Any, List


class SearchTreeError(Exception):
    """Base class for all SearchTreeLib errors."""
    pass


class InvalidConfigurationError(SearchTreeError, ValueError):
    """Raised when a TreeConfig fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")


class UnorderableValueError(SearchTreeError, TypeError):
    """Raised when a value cannot be ordered against the tree's values.

    The tree is left untouched when this is raised.
    """

    def __init__(self, value: Any, other: Any, cause: Exception):
        self.value = value
        self.other = other
        super().__init__(
            f"Cannot order {value!r} against {other!r}: {cause}"
        )


class InvariantViolationError(SearchTreeError, AssertionError):
    """Raised when invariant checking finds a broken search order."""

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__(
            f"Search tree invariant violated: {'; '.join(self.violations)}"
        )
