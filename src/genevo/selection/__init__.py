"""
Selection strategies for genevo.
"""

from typing import Optional

from ..core.exceptions import ConfigurationError
from ..utils.random_source import RandomSource
from .selectors import (
    BestFitSelector,
    RandomSelector,
    RouletteWheelSelector,
    partition_pairs,
    select_rnd_element,
)

SELECTORS = {
    "random": RandomSelector,
    "best_fit": BestFitSelector,
    "roulette": RouletteWheelSelector,
}


def get_selector(name: str, rng: Optional[RandomSource] = None):
    """
    Build a selection strategy by name.

    Args:
        name: One of "random", "best_fit" or "roulette"
        rng: Randomness source for stochastic strategies

    Returns:
        Selection strategy instance
    """
    if name not in SELECTORS:
        raise ConfigurationError(
            f"Unknown selection method: {name}. Available: {', '.join(SELECTORS)}"
        )
    if name == "best_fit":
        return BestFitSelector()
    return SELECTORS[name](rng=rng)


__all__ = [
    "BestFitSelector",
    "RandomSelector",
    "RouletteWheelSelector",
    "partition_pairs",
    "select_rnd_element",
    "SELECTORS",
    "get_selector",
]
