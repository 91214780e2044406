"""
Example problems for genevo.

This module provides ready-made problem bundles used by the command-line
runner and the examples: a real-valued target-sum problem and a string
phrase-matching problem.
"""

from typing import Optional

from ..utils.random_source import RandomSource
from .base import Problem
from .target_sum import create_target_sum_problem, target_sum_fitness
from .phrase import create_phrase_problem, phrase_distance, phrase_fitness

PROBLEMS = {
    "sum7": create_target_sum_problem,
    "phrase": create_phrase_problem,
}


def get_problem(name: str, rng: Optional[RandomSource] = None) -> Problem:
    """
    Create a bundled problem by name.

    Args:
        name: One of the keys of ``PROBLEMS``
        rng: Randomness source for the problem's generator and mutator

    Returns:
        Problem bundle
    """
    if name not in PROBLEMS:
        raise KeyError(f"Unknown problem: {name}. Available: {', '.join(PROBLEMS)}")
    return PROBLEMS[name](rng=rng)


__all__ = [
    "Problem",
    "PROBLEMS",
    "get_problem",
    "create_target_sum_problem",
    "target_sum_fitness",
    "create_phrase_problem",
    "phrase_distance",
    "phrase_fitness",
]
