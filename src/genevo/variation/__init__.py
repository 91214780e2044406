"""
Variation operators (crossover and mutation) for genevo.
"""

from typing import Optional

from ..core.exceptions import ConfigurationError
from ..utils.random_source import RandomSource
from .crossover import (
    MultiPointCrossover,
    SinglePointCrossover,
    UniformCrossover,
    cross_at,
)
from .mutation import GeneMutator, gene_mutate, mutate_with_rate

CROSSOVERS = ("single_point", "multi_point", "uniform")


def get_crossover(name: str, rng: Optional[RandomSource] = None, n_points: int = 2):
    """
    Build a crossover operator by name.

    Args:
        name: One of "single_point", "multi_point" or "uniform"
        rng: Randomness source
        n_points: Number of cut points for "multi_point"

    Returns:
        Crossover operator instance
    """
    if name == "single_point":
        return SinglePointCrossover(rng=rng)
    if name == "multi_point":
        return MultiPointCrossover(n_points=n_points, rng=rng)
    if name == "uniform":
        return UniformCrossover(rng=rng)
    raise ConfigurationError(
        f"Unknown crossover method: {name}. Available: {', '.join(CROSSOVERS)}"
    )


__all__ = [
    "SinglePointCrossover",
    "MultiPointCrossover",
    "UniformCrossover",
    "cross_at",
    "GeneMutator",
    "gene_mutate",
    "mutate_with_rate",
    "CROSSOVERS",
    "get_crossover",
]
