"""
Mutation operators for genevo.

Gene-level changes are delegated to a caller-supplied ``gene_mutator``; this
module decides which gene is touched and whether an individual is mutated at
all.
"""

import logging
from typing import Callable, Optional

from ..core.population import Gene, Individual, as_individual
from ..utils.random_source import RandomSource, ensure_source, randint

logger = logging.getLogger(__name__)

GeneMutationFn = Callable[[Gene], Gene]
IndividualMutator = Callable[[Individual], Individual]


def gene_mutate(gene_mutator: GeneMutationFn, individual: Individual, rng: RandomSource) -> Individual:
    """
    Replace exactly one randomly chosen gene by ``gene_mutator(old_gene)``.

    Args:
        gene_mutator: Function producing a new gene from the old one
        individual: Individual to mutate
        rng: Randomness source

    Returns:
        New individual differing from the input in at most one position
    """
    individual = as_individual(individual)
    index = randint(rng, len(individual))
    return individual[:index] + (gene_mutator(individual[index]),) + individual[index + 1:]


class GeneMutator:
    """
    Individual-level mutator that changes a single gene per call.

    Attributes:
        gene_mutator: Caller-supplied gene mutation function
    """

    def __init__(self, gene_mutator: GeneMutationFn, rng: Optional[RandomSource] = None):
        self.gene_mutator = gene_mutator
        self.rng = ensure_source(rng)

    def mutate(self, individual: Individual) -> Individual:
        return gene_mutate(self.gene_mutator, individual, self.rng)

    __call__ = mutate


def mutate_with_rate(
    rate: float,
    mutator: IndividualMutator,
    individual: Individual,
    rng: RandomSource,
) -> Individual:
    """
    Apply ``mutator`` to ``individual`` with probability ``rate``.

    One draw is consumed per call, so decisions for different individuals are
    independent.

    Args:
        rate: Mutation probability in [0, 1]
        mutator: Individual-level mutation function
        individual: Candidate for mutation
        rng: Randomness source

    Returns:
        ``mutator(individual)`` or ``individual`` unchanged
    """
    if rng.draw() < rate:
        mutated = as_individual(mutator(individual))
        logger.debug(f"Mutated individual ({len(mutated)} genes)")
        return mutated
    return individual
