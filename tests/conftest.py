"""Shared fixtures: a scripted random source for reproducible placement."""

import pytest

from rota.grid import Grid


class ScriptedRng:
    """Hands out pre-recorded draws in order; mimics numpy Generator.integers/permutation."""

    def __init__(self, draws, order=None):
        self.draws = list(draws)
        self.order = order
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.draws.pop(0)

    def permutation(self, n):
        return list(self.order) if self.order is not None else list(range(n))


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def small_grid() -> Grid:
    return Grid(["A", "B"], ["1", "2"])
