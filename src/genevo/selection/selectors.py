"""
Mating-pair selection strategies for genevo.

Every strategy is a callable ``select(state) -> [(i1, i2), ...]``. Pairs are
formed by partitioning an ordered sequence of individuals into consecutive
twos; a leftover unpaired individual is silently dropped.

Three strategies are provided:
- RandomSelector: uniform shuffle of the population, then pairing
- BestFitSelector: pairs individuals in descending fitness order
- RouletteWheelSelector: fitness-proportional draws with replacement
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..core.exceptions import InvalidFitnessError
from ..core.fitness import sorted_population
from ..core.population import EngineState, FitnessMap, Individual
from ..utils.random_source import RandomSource, ensure_source, shuffled

logger = logging.getLogger(__name__)

Pair = Tuple[Individual, Individual]


def partition_pairs(individuals: Sequence[Individual]) -> List[Pair]:
    """
    Partition a sequence into consecutive pairs, dropping an odd leftover.

    Args:
        individuals: Ordered individuals

    Returns:
        List of (individuals[0], individuals[1]), (individuals[2], individuals[3]), ...
    """
    return [(individuals[i], individuals[i + 1]) for i in range(0, len(individuals) - 1, 2)]


class RandomSelector:
    """Selects random pairs of individuals from the population."""

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = ensure_source(rng)

    def select(self, state: EngineState) -> List[Pair]:
        return partition_pairs(shuffled(self.rng, state.population))

    __call__ = select


class BestFitSelector:
    """
    Pairs individuals by sorting them by fitness.

    The two best individuals mate together, then the next two, and so on.
    Because pairs come from the fitness map, duplicate individuals appear
    only once.
    """

    def select(self, state: EngineState) -> List[Pair]:
        return partition_pairs([individual for individual, _ in sorted_population(state)])

    __call__ = select


def select_rnd_element(fitness_map: FitnessMap, total: float, rng: RandomSource) -> Individual:
    """
    Draw one individual with probability proportional to its score.

    A value ``r`` is drawn uniformly in ``[0, total)`` and the entries are
    scanned in a freshly shuffled order while accumulating a running sum
    ``p``; the first entry with ``p <= r <= p + score`` is returned. If
    floating-point accumulation leaves ``r`` uncovered, the last scanned entry
    is returned.

    Args:
        fitness_map: Mapping individual -> non-negative score
        total: Sum of all scores in the mapping
        rng: Randomness source

    Returns:
        The selected individual
    """
    r = rng.draw() * total
    p = 0.0
    selected = None

    for individual, score in shuffled(rng, list(fitness_map.items())):
        selected = individual
        if p <= r <= p + score:
            return individual
        p += score

    logger.debug(f"Roulette draw {r:.6f} fell past accumulated total {p:.6f}, using last entry")
    return selected


class RouletteWheelSelector:
    """
    Standard roulette wheel (fitness-proportional) selection.

    Draws exactly ``N`` individuals independently with replacement, where
    ``N`` is the population size, then pairs them consecutively to yield
    ``N // 2`` pairs.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = ensure_source(rng)

    def select(self, state: EngineState) -> List[Pair]:
        """
        Select mating pairs by fitness-proportional draws.

        Args:
            state: Current engine state

        Returns:
            ``len(state.population) // 2`` pairs

        Raises:
            InvalidFitnessError: If the total fitness is not positive
        """
        total = sum(state.fitness_map.values())
        if total <= 0:
            raise InvalidFitnessError(
                f"Roulette wheel selection requires a positive total fitness, got {total}"
            )

        target = len(state.population)
        drawn = [select_rnd_element(state.fitness_map, total, self.rng) for _ in range(target)]
        return partition_pairs(drawn)

    __call__ = select
