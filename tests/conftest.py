"""
Pytest configuration and shared fixtures for the Markov chain tests.
"""
import itertools
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def scripted():
    """Factory of uniform01 callables replaying the given draws in a loop."""
    def make(*values):
        draws = itertools.cycle(values)
        return lambda: next(draws)
    return make


@pytest.fixture
def branching_corpus():
    return [["a", "b", "c"], ["x", "b", "d"]]
