"""Unit tests for range extraction."""

from fuse_search.core.ranges import find_ranges


class TestFindRanges:
    """Test cases for find_ranges."""

    def test_two_runs(self):
        """Test the basic example with two separate runs."""
        assert find_ranges([0, 1, 1, 0, 1, 1, 1]) == [(1, 2), (4, 6)]

    def test_all_zeros(self):
        """Test that a mask with no hits yields no ranges."""
        assert find_ranges([0, 0, 0, 0]) == []

    def test_empty_mask(self):
        """Test that an empty mask yields no ranges."""
        assert find_ranges([]) == []

    def test_all_ones(self):
        """Test that a full mask yields a single range."""
        assert find_ranges([1, 1, 1]) == [(0, 2)]

    def test_single_positions(self):
        """Test isolated hits, including the first and last positions."""
        assert find_ranges([1, 0, 1, 0, 1]) == [(0, 0), (2, 2), (4, 4)]

    def test_runs_are_maximal(self):
        """Test that adjacent hits are never split."""
        ranges = find_ranges([0, 1, 1, 1, 1, 1, 0])
        assert ranges == [(1, 5)]
