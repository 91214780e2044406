"""
Phrase-matching problem.

Evolve a string of lowercase letters and spaces toward a target phrase. The
distance between two strings is the sum of the absolute differences of their
character codes; fitness is ``1 / (1 + distance / 10)``.
"""

import string
from typing import Optional, Sequence

from ..core.population import Individual
from ..utils.random_source import RandomSource, ensure_source, randint
from .base import Problem

DEFAULT_PHRASE = "this is an example phrase i am trying to evolve"
LETTERS = string.ascii_lowercase + " "


def phrase_distance(s1: Sequence[str], s2: Sequence[str]) -> int:
    """Sum of absolute character-code differences, position by position."""
    return sum(abs(ord(c1) - ord(c2)) for c1, c2 in zip(s1, s2))


def phrase_fitness(individual: Individual, phrase: str = DEFAULT_PHRASE) -> float:
    """
    Score how close an individual is to ``phrase``.

    Args:
        individual: Sequence of single-character genes
        phrase: Target phrase

    Returns:
        Fitness in (0, 1], 1.0 for an exact match
    """
    return 1.0 / (1.0 + phrase_distance(phrase, individual) / 10.0)


def create_phrase_problem(rng: Optional[RandomSource] = None, phrase: str = DEFAULT_PHRASE) -> Problem:
    """
    Create the phrase-matching problem.

    Args:
        rng: Randomness source for the generator and gene mutator
        phrase: Target phrase (letters and spaces only)

    Returns:
        Problem bundle
    """
    unknown = set(phrase) - set(LETTERS)
    if unknown:
        raise ValueError(f"Phrase contains unsupported characters: {''.join(sorted(unknown))}")

    rng = ensure_source(rng)

    def random_letter():
        return LETTERS[randint(rng, len(LETTERS))]

    def generator():
        return tuple(random_letter() for _ in range(len(phrase)))

    def letter_mutator(gene):
        return random_letter()

    return Problem(
        name="phrase",
        generator=generator,
        fitness_fn=lambda individual: phrase_fitness(individual, phrase),
        gene_mutator=letter_mutator,
        threshold=0.99,
        settings={
            "population_size": 500,
            "mutation_rate": 0.5,
            "keep_n": 0,
            "selection": "roulette",
            "crossover": "uniform",
            "ranked": False,
        },
    )
