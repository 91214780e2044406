"""
Injectable randomness for genetic operators.

Every stochastic operator in genevo draws from a ``RandomSource`` passed in
explicitly instead of a module-level generator. The only capability a source
must provide is ``draw()``, a float uniform in ``[0, 1)``; integer draws and
shuffles are derived from it here so that tests can script exact sequences.
"""

from typing import List, Optional, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce uniform floats in [0, 1)."""

    def draw(self) -> float:
        ...


class NumpyRandomSource:
    """
    Default randomness source backed by ``numpy.random.Generator``.

    Attributes:
        seed: Seed the generator was created with (None for OS entropy)
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the source.

        Args:
            seed: Optional seed for reproducible runs
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def draw(self) -> float:
        """Return a float uniform in [0, 1)."""
        return float(self._rng.random())

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"


def randint(rng: RandomSource, n: int) -> int:
    """
    Draw an integer uniform in ``[0, n)``.

    Args:
        rng: Randomness source
        n: Exclusive upper bound, must be positive

    Returns:
        Integer in [0, n)
    """
    if n <= 0:
        raise ValueError(f"randint upper bound must be positive, got {n}")
    # Clamp guards against a source returning exactly 1.0
    return min(int(rng.draw() * n), n - 1)


def shuffled(rng: RandomSource, items: Sequence[T]) -> List[T]:
    """
    Return a shuffled copy of ``items`` (Fisher-Yates, one draw per swap).

    Args:
        rng: Randomness source
        items: Sequence to shuffle; left untouched

    Returns:
        New list with the same elements in random order
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = randint(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def ensure_source(rng: Optional[RandomSource]) -> RandomSource:
    """Return ``rng`` or a fresh unseeded ``NumpyRandomSource`` when None."""
    return rng if rng is not None else NumpyRandomSource()
