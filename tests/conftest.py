"""Shared fixtures for the SearchTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import Tree, build_tree


SCENARIO_VALUES = [17, 8, 3, 27, 22, 55, 83]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests excluded by run_tests.py")


@pytest.fixture
def empty_tree():
    """A fresh, empty tree."""
    return Tree()


@pytest.fixture
def scenario_tree():
    """Tree built from 17, 8, 3, 27, 22, 55, 83 in that order.

    Shape:
              17
             /  \\
            8    27
           /    /  \\
          3   22    55
                      \\
                       83
    """
    return build_tree(SCENARIO_VALUES)
