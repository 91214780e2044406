"""
Target-sum problem.

Evolve a vector of real genes in ``[0, max_gene)`` whose components add up to
a target value. Fitness is ``1 / (1 + |sum - target|)``, which reaches 1.0
exactly at the target.
"""

from typing import Optional

from ..core.population import Individual
from ..utils.random_source import RandomSource, ensure_source
from .base import Problem

DEFAULT_TARGET = 7.0
DEFAULT_LENGTH = 10
DEFAULT_MAX_GENE = 3.0


def target_sum_fitness(individual: Individual, target: float = DEFAULT_TARGET) -> float:
    """
    Score how close the genes of an individual add up to ``target``.

    Args:
        individual: Sequence of numeric genes
        target: Desired sum

    Returns:
        Fitness in (0, 1], 1.0 when the sum equals the target
    """
    return 1.0 / (1.0 + abs(sum(individual) - target))


def create_target_sum_problem(
    rng: Optional[RandomSource] = None,
    target: float = DEFAULT_TARGET,
    length: int = DEFAULT_LENGTH,
    max_gene: float = DEFAULT_MAX_GENE,
) -> Problem:
    """
    Create the target-sum problem.

    Args:
        rng: Randomness source for the generator and gene mutator
        target: Desired sum of the genes
        length: Number of genes per individual
        max_gene: Exclusive upper bound of each gene

    Returns:
        Problem bundle
    """
    rng = ensure_source(rng)

    def generator():
        return tuple(max_gene * rng.draw() for _ in range(length))

    def gene_mutator(gene):
        return max_gene * rng.draw()

    return Problem(
        name="sum7",
        generator=generator,
        fitness_fn=lambda individual: target_sum_fitness(individual, target),
        gene_mutator=gene_mutator,
        threshold=0.99999,
        settings={
            "population_size": 50,
            "mutation_rate": 0.05,
            "keep_n": 10,
            "selection": "roulette",
            "crossover": "single_point",
            "ranked": False,
        },
    )
