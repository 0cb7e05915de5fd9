# tests/conftest.py
"""
Pytest configuration and shared fixtures for the Monty Hall tests
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Make montyhall importable without installing the project
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


class StubRng:
    """Deterministic stand-in for numpy's Generator.choice

    Always picks the option at `index`; sampling without replacement keeps the
    given order. Counts calls so tests can check when no randomness is drawn.
    """

    def __init__(self, index=0):
        self.index = index
        self.calls = 0

    def choice(self, a, size=None, replace=True):
        self.calls += 1
        if size is None:
            return list(a)[self.index]
        return list(a)[:size]


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def stub_rng():
    return StubRng()
