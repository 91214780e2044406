"""
Core data structures for genevo: individuals, engine state, fitness and errors.
"""

from .exceptions import (
    GenevoError,
    EmptyPopulationError,
    InvalidFitnessError,
    InvalidCrossoverConfigError,
    ConfigurationError,
    PersistenceError,
)
from .population import EngineState, as_individual, setup_population
from .fitness import evaluate, rank, sorted_population, best_fit

__all__ = [
    "GenevoError",
    "EmptyPopulationError",
    "InvalidFitnessError",
    "InvalidCrossoverConfigError",
    "ConfigurationError",
    "PersistenceError",
    "EngineState",
    "as_individual",
    "setup_population",
    "evaluate",
    "rank",
    "sorted_population",
    "best_fit",
]
