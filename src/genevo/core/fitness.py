"""
Fitness evaluation and ranking for genevo.

Fitness is computed by applying a caller-supplied function to every individual
of a population. Evaluation is the only parallel operation in the engine: each
individual is scored by an independent task on a thread pool, and the results
are merged into a mapping keyed by individual value.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional, Tuple

from .exceptions import EmptyPopulationError
from .population import EngineState, FitnessMap, Individual, Population, Score

logger = logging.getLogger(__name__)

FitnessFn = Callable[[Individual], float]


def evaluate(
    fitness_fn: FitnessFn,
    population: Population,
    max_workers: Optional[int] = None,
) -> FitnessMap:
    """
    Evaluate every individual of a population concurrently.

    Equal individuals collapse to a single key. When that happens the
    evaluation that completes last wins, so stochastic fitness functions are
    not guaranteed a per-instance result. Keys are ordered by first
    occurrence in the population regardless of completion order.

    Args:
        fitness_fn: Function mapping an individual to a real-valued score
        population: Individuals to evaluate
        max_workers: Thread pool size (None lets the executor decide)

    Returns:
        Mapping individual -> raw fitness score
    """
    if not population:
        return {}

    fitness: FitnessMap = dict.fromkeys(population)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(fitness_fn, individual): individual for individual in population}

        # Merging happens on this thread only, in completion order
        for future in as_completed(futures):
            fitness[futures[future]] = future.result()

    logger.debug(f"Evaluated {len(population)} individuals ({len(fitness)} distinct)")
    return fitness


def rank(fitness_map: FitnessMap) -> FitnessMap:
    """
    Replace raw scores by ranks.

    Entries are sorted ascending by score and rank ``i`` is the sorted
    position, so 0 is the worst individual. Ties keep the mapping's insertion
    order because the sort is stable; no other tiebreak is applied.

    Args:
        fitness_map: Mapping individual -> raw score

    Returns:
        Mapping individual -> rank in 0..k-1
    """
    ordered = sorted(fitness_map.items(), key=lambda item: item[1])
    return {individual: position for position, (individual, _) in enumerate(ordered)}


def sorted_population(state: EngineState) -> List[Tuple[Individual, Score]]:
    """
    Get the fitness entries of a state sorted by score, best first.

    This is the ascending order used by ``rank`` reversed, so tied entries
    come out latest-inserted first and the best entry is the one ``rank``
    would give the highest rank.

    Args:
        state: Engine state to inspect

    Returns:
        List of (individual, score) pairs in non-increasing score order

    Raises:
        EmptyPopulationError: If the state has no fitness entries
    """
    if not state.fitness_map:
        raise EmptyPopulationError("Cannot sort an empty population")

    return list(reversed(sorted(state.fitness_map.items(), key=lambda item: item[1])))


def best_fit(state: EngineState) -> Tuple[Individual, Score]:
    """
    Get the individual with the highest score (a rank when the state is ranked).

    Args:
        state: Engine state to inspect

    Returns:
        (individual, score) of the best entry

    Raises:
        EmptyPopulationError: If the state has no fitness entries
    """
    return sorted_population(state)[0]
