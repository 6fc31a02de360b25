"""Testing utilities for SearchTreeLib consumers."""

from .fixtures import TreeInspector

__all__ = ['TreeInspector']
