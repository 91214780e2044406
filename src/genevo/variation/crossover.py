"""
Crossover operators for genevo.

Each operator is a callable ``crossover(i1, i2) -> (child1, child2)`` over two
parents of the same length ``L``; both children also have length ``L``.

Three generic operators are provided:
- SinglePointCrossover: swap tails after one random cut
- MultiPointCrossover: alternate parent segments across n random cuts
- UniformCrossover: choose the parent of every gene by an independent coin flip
"""

from typing import Optional, Tuple

from ..core.exceptions import InvalidCrossoverConfigError
from ..core.population import Individual, as_individual
from ..utils.random_source import RandomSource, ensure_source, randint

Offspring = Tuple[Individual, Individual]


def _check_parents(i1: Individual, i2: Individual) -> int:
    if len(i1) != len(i2):
        raise InvalidCrossoverConfigError(
            f"Parents must have the same length, got {len(i1)} and {len(i2)}"
        )
    return len(i1)


def cross_at(i1: Individual, i2: Individual, cut: int) -> Offspring:
    """
    Exchange the tails of two parents at a fixed cut index.

    Applying the same cut to the returned children gives back the parents.

    Args:
        i1: First parent
        i2: Second parent
        cut: Index in [0, L] where the tails start

    Returns:
        (i1[:cut] + i2[cut:], i2[:cut] + i1[cut:])
    """
    i1, i2 = as_individual(i1), as_individual(i2)
    return i1[:cut] + i2[cut:], i2[:cut] + i1[cut:]


class SinglePointCrossover:
    """Crosses two individuals at a single randomly selected point."""

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = ensure_source(rng)

    def crossover(self, i1: Individual, i2: Individual) -> Offspring:
        length = _check_parents(i1, i2)
        if length == 0:
            raise InvalidCrossoverConfigError("Cannot cross empty individuals")

        cut = randint(self.rng, length)
        return cross_at(i1, i2, cut)

    __call__ = crossover


class MultiPointCrossover:
    """
    Crosses two individuals at ``n_points`` randomly selected cut points.

    Segments are taken alternately from each parent. Each cut is drawn from
    the part of the parents that is still unconsumed, leaving room for the
    remaining cuts, and the roles of the two parents swap after every cut.

    Attributes:
        n_points: Number of cut points (0 returns the parents unchanged)
    """

    def __init__(self, n_points: int = 2, rng: Optional[RandomSource] = None):
        """
        Initialize the operator.

        Args:
            n_points: Number of cut points, must be non-negative
            rng: Randomness source
        """
        if n_points < 0:
            raise InvalidCrossoverConfigError(f"n_points must be non-negative, got {n_points}")
        self.n_points = n_points
        self.rng = ensure_source(rng)

    def crossover(self, i1: Individual, i2: Individual) -> Offspring:
        """
        Cross two parents.

        Args:
            i1: First parent
            i2: Second parent

        Returns:
            Two children of the same length as the parents

        Raises:
            InvalidCrossoverConfigError: If n_points >= L or lengths differ
        """
        length = _check_parents(i1, i2)
        if self.n_points == 0:
            return as_individual(i1), as_individual(i2)
        if self.n_points >= length:
            raise InvalidCrossoverConfigError(
                f"Cannot place {self.n_points} cut points in individuals of length {length}"
            )

        head1: Individual = ()
        head2: Individual = ()
        current, other = as_individual(i1), as_individual(i2)

        for remaining in range(self.n_points, 0, -1):
            cut = randint(self.rng, len(current) - (remaining - 1))
            head1 += current[:cut]
            head2 += other[:cut]
            current, other = other[cut:], current[cut:]

        return head1 + current, head2 + other

    __call__ = crossover


class UniformCrossover:
    """
    Crosses two individuals by choosing the source of each gene at random.

    For every position a fair coin decides which parent gives its gene to the
    first child; the second child receives the gene from the other parent.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = ensure_source(rng)

    def crossover(self, i1: Individual, i2: Individual) -> Offspring:
        _check_parents(i1, i2)

        child1 = []
        child2 = []
        for g1, g2 in zip(i1, i2):
            if self.rng.draw() < 0.5:
                child1.append(g1)
                child2.append(g2)
            else:
                child1.append(g2)
                child2.append(g1)

        return tuple(child1), tuple(child2)

    __call__ = crossover
