"""Unit tests for match scoring."""

import pytest
from fuse_search.core.scoring import calculate_score


class TestCalculateScore:
    """Test cases for calculate_score."""

    def test_exact_match_at_expected_location(self):
        """Test that zero errors at the expected location score 0."""
        assert calculate_score("abc", e=0, x=0, loc=0, distance=100) == 0.0

    def test_exact_location_mode_hit(self):
        """Test distance 0 with the match exactly at the location."""
        assert calculate_score("abc", e=0, x=5, loc=5, distance=0) == 0.0

    def test_exact_location_mode_miss(self):
        """Test distance 0 with the match one character away."""
        assert calculate_score("abc", e=0, x=5, loc=6, distance=0) == 1.0

    def test_exact_location_mode_keeps_accuracy(self):
        """Test that errors still count when the location is exact."""
        assert calculate_score("abcd", e=1, x=3, loc=3, distance=0) == 0.25

    def test_accuracy_component(self):
        """Test the error ratio contribution."""
        assert calculate_score("abc", e=1, x=0, loc=0, distance=100) == pytest.approx(1 / 3)

    def test_proximity_component(self):
        """Test the drift contribution in both directions."""
        assert calculate_score("abc", e=0, x=0, loc=10, distance=100) == pytest.approx(0.1)
        assert calculate_score("abc", e=0, x=10, loc=0, distance=100) == pytest.approx(0.1)

    def test_combined_score(self):
        """Test errors and drift add up."""
        assert calculate_score("abcd", e=2, x=0, loc=10, distance=100) == pytest.approx(0.6)

    def test_score_is_not_clamped(self):
        """Test that scores above 1.0 are returned as is."""
        assert calculate_score("abc", e=3, x=0, loc=200, distance=100) == pytest.approx(3.0)
