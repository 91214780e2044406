"""
Population and engine state for genevo.

This module defines the immutable ``EngineState`` that each generation
transition produces, together with helpers for building and summarizing
populations of individuals.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Tuple, Union

import numpy as np

Gene = Any
Individual = Tuple[Gene, ...]
Score = Union[float, int]
FitnessMap = Dict[Individual, Score]
Population = Tuple[Individual, ...]


def as_individual(genes: Iterable[Gene]) -> Individual:
    """
    Normalize a gene sequence into an immutable, hashable individual.

    Strings, lists and generators are all accepted so that caller-supplied
    generators can return whatever sequence type is natural for them.

    Args:
        genes: Any iterable of genes

    Returns:
        Tuple of genes
    """
    if isinstance(genes, tuple):
        return genes
    return tuple(genes)


def setup_population(generator: Callable[[], Iterable[Gene]], size: int) -> Population:
    """
    Generate a population by calling the individual generator ``size`` times.

    Args:
        generator: Zero-argument factory producing one individual per call
        size: Number of individuals to generate

    Returns:
        Tuple of ``size`` individuals
    """
    return tuple(as_individual(generator()) for _ in range(size))


@dataclass(frozen=True)
class EngineState:
    """
    Data that changes from one generation to the next.

    A new instance is produced on every transition; instances are never
    modified in place.

    Attributes:
        population: Ordered individuals of the current generation (duplicates allowed)
        fitness_map: Individual -> raw fitness or rank; equal individuals share one entry
        generation: Number of transitions applied since initialization
    """

    population: Population
    fitness_map: FitnessMap = field(default_factory=dict)
    generation: int = 0

    @property
    def size(self) -> int:
        """Number of individuals in the population (duplicates counted)."""
        return len(self.population)

    def is_empty(self) -> bool:
        """Check if the population is empty."""
        return len(self.population) == 0

    def statistics(self) -> Dict[str, Any]:
        """
        Compute summary statistics over the fitness map.

        Returns:
            Dictionary with size, distinct count and avg/best/worst scores
        """
        scores = list(self.fitness_map.values())

        return {
            "size": len(self.population),
            "distinct": len(self.fitness_map),
            "avg_fitness": float(np.mean(scores)) if scores else None,
            "best_fitness": float(np.max(scores)) if scores else None,
            "worst_fitness": float(np.min(scores)) if scores else None,
        }

    def __len__(self) -> int:
        return len(self.population)

    def __iter__(self):
        return iter(self.population)

