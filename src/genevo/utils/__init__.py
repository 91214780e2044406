"""
Utility modules for genevo.

This package provides the injectable randomness source used by all genetic
operators and the on-disk evolution logger.
"""

from .random_source import (
    RandomSource,
    NumpyRandomSource,
    randint,
    shuffled,
    ensure_source
)

from .evolution_logger import EvolutionLogger

__all__ = [
    # Randomness
    "RandomSource",
    "NumpyRandomSource",
    "randint",
    "shuffled",
    "ensure_source",

    # Logging
    "EvolutionLogger",
]
