"""Shared fixtures for random-private-ip tests."""

import pytest


class ScriptedRandom:
    """Fake random source returning preset values from randint().

    Each call records its (a, b) bounds. A preset value of "low" or "high"
    returns the corresponding bound.
    """

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = self.values.pop(0)
        if value == "low":
            return a
        if value == "high":
            return b
        return value


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom
