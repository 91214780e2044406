"""
Shared fixtures for genevo tests.
"""

import itertools

import pytest

from genevo.core.population import EngineState


class ScriptedRandomSource:
    """
    Randomness source returning a fixed sequence of draws.

    Args:
        values: Draws to return, in order
        cycle: Repeat the sequence forever instead of failing when exhausted
    """

    def __init__(self, values, cycle=False):
        self._values = list(values)
        self._iter = itertools.cycle(self._values) if cycle else iter(self._values)
        self.calls = 0

    def draw(self) -> float:
        self.calls += 1
        try:
            return next(self._iter)
        except StopIteration:
            raise AssertionError(f"Scripted random source exhausted after {len(self._values)} draws")


@pytest.fixture
def scripted_rng():
    """Factory for scripted randomness sources."""
    return ScriptedRandomSource


@pytest.fixture
def identity_shuffle_rng():
    """Source whose draws make every shuffle keep the input order."""
    return ScriptedRandomSource([0.999], cycle=True)


@pytest.fixture
def scenario_population():
    """Four 4-bit individuals used throughout the tests."""
    return (tuple("1100"), tuple("1010"), tuple("0011"), tuple("0000"))


@pytest.fixture
def scenario_fitness(scenario_population):
    """Raw fitness of the scenario population."""
    return dict(zip(scenario_population, [4, 3, 2, 1]))


@pytest.fixture
def scenario_state(scenario_population, scenario_fitness):
    """Unranked engine state for the scenario population."""
    return EngineState(population=scenario_population, fitness_map=scenario_fitness, generation=0)
