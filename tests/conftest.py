"""
Pytest configuration file providing shared fixtures and helper functions.
"""
import numpy as np
import pytest


class FixedSource:
    """Random source stub whose every draw returns ``low + offset``."""

    def __init__(self, offset=0):
        self.offset = offset
        self.calls = []

    def integers(self, low, high=None):
        if high is None:
            low, high = 0, low
        self.calls.append((low, high))
        return min(low + self.offset, high - 1)


class ScriptedSource:
    """Random source stub that replays a fixed sequence of draws."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = []

    def integers(self, low, high=None):
        if high is None:
            low, high = 0, low
        self.calls.append((low, high))
        value = self._draws.pop(0)
        assert low <= value < high, f"scripted draw {value} outside [{low}, {high})"
        return value


class FailingSource:
    """Random source stub that raises after *n_ok* draws."""

    def __init__(self, n_ok=0):
        self.n_ok = n_ok

    def integers(self, low, high=None):
        if self.n_ok <= 0:
            raise RuntimeError("entropy source exhausted")
        self.n_ok -= 1
        return low if high is not None else 0


@pytest.fixture
def rng():
    """Seeded numpy Generator for reproducible draws."""
    return np.random.default_rng(20240601)


@pytest.fixture
def zero_source():
    """Random source fixed at its lowest value."""
    return FixedSource(0)
