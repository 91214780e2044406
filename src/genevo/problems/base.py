"""
Problem bundles for genevo.

A problem packages the caller-side collaborators the engine needs (an
individual generator, a fitness function and a gene mutator) together with
the engine settings and stop threshold that suit it.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable

from ..core.population import Gene, Individual


@dataclass
class Problem:
    """
    A ready-to-run optimization problem.

    Attributes:
        name: Problem identifier
        generator: Zero-argument factory producing one individual
        fitness_fn: Function to maximize
        gene_mutator: Gene-level mutation function
        threshold: Best score at which the problem counts as solved
        settings: Recommended EvolutionEngineConfig overrides
    """

    name: str
    generator: Callable[[], Iterable[Gene]]
    fitness_fn: Callable[[Individual], float]
    gene_mutator: Callable[[Gene], Gene]
    threshold: float
    settings: Dict[str, Any] = field(default_factory=dict)

    def is_solved(self, score: float) -> bool:
        """Check whether a best score reaches the threshold."""
        return score >= self.threshold
