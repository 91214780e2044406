"""
Unit tests for the injectable randomness source.
"""

import pytest

from genevo.utils.random_source import (
    NumpyRandomSource,
    RandomSource,
    ensure_source,
    randint,
    shuffled,
)


class TestNumpyRandomSource:
    """Test cases for NumpyRandomSource."""

    def test_draw_in_unit_interval(self):
        """Test draws fall in [0, 1)."""
        rng = NumpyRandomSource(seed=1)

        draws = [rng.draw() for _ in range(1000)]

        assert all(0.0 <= d < 1.0 for d in draws)

    def test_seed_is_reproducible(self):
        """Test two sources with the same seed draw the same values."""
        a = NumpyRandomSource(seed=42)
        b = NumpyRandomSource(seed=42)

        assert [a.draw() for _ in range(20)] == [b.draw() for _ in range(20)]

    def test_satisfies_protocol(self):
        """Test the default source is a RandomSource."""
        assert isinstance(NumpyRandomSource(), RandomSource)

    def test_repr_mentions_seed(self):
        """Test repr shows the seed."""
        assert repr(NumpyRandomSource(seed=7)) == "NumpyRandomSource(seed=7)"


class TestDerivedDraws:
    """Test cases for randint, shuffled and ensure_source."""

    def test_randint_maps_draw_to_index(self, scripted_rng):
        """Test randint scales the draw to [0, n)."""
        rng = scripted_rng([0.0, 0.5, 0.74, 0.99])

        assert [randint(rng, 4) for _ in range(4)] == [0, 2, 2, 3]

    def test_randint_clamps_to_upper_bound(self, scripted_rng):
        """Test a draw of exactly 1.0 still yields n - 1."""
        rng = scripted_rng([1.0])

        assert randint(rng, 5) == 4

    def test_randint_rejects_non_positive_bound(self, scripted_rng):
        """Test randint fails for n <= 0."""
        with pytest.raises(ValueError, match="must be positive"):
            randint(scripted_rng([0.5]), 0)

    def test_shuffled_identity(self, identity_shuffle_rng):
        """Test high draws leave the order unchanged."""
        assert shuffled(identity_shuffle_rng, [1, 2, 3, 4]) == [1, 2, 3, 4]

    def test_shuffled_swaps(self, scripted_rng):
        """Test low draws swap every element with the first one."""
        rng = scripted_rng([0.0, 0.0, 0.0])

        # i=3 swaps with 0, i=2 swaps with 0, i=1 swaps with 0
        assert shuffled(rng, ["a", "b", "c", "d"]) == ["b", "c", "d", "a"]

    def test_shuffled_is_permutation_and_copy(self):
        """Test shuffling keeps the elements and leaves the input untouched."""
        items = list(range(50))
        result = shuffled(NumpyRandomSource(seed=3), items)

        assert sorted(result) == items
        assert items == list(range(50))

    def test_shuffled_uses_one_draw_per_swap(self, scripted_rng):
        """Test a sequence of n items consumes n - 1 draws."""
        rng = scripted_rng([0.5] * 4)

        shuffled(rng, range(5))

        assert rng.calls == 4

    def test_ensure_source(self):
        """Test ensure_source keeps a given source and creates one for None."""
        rng = NumpyRandomSource(seed=1)

        assert ensure_source(rng) is rng
        assert isinstance(ensure_source(None), NumpyRandomSource)
