"""Unit tests for token-averaged matching."""

import pytest
from fuse_search.core.bitap import bitap_search
from fuse_search.core.pattern import compile_pattern
from fuse_search.core.tokens import tokenized_search, word_patterns


class TestTokenizedSearch:
    """Test cases for tokenized_search."""

    def test_full_and_word_matches(self):
        """Test the average over the full pattern and each word."""
        result = tokenized_search(compile_pattern("hello world"), "hello world")

        assert result is not None
        score, ranges = result
        assert score == pytest.approx(0.02)
        assert ranges == [(0, 10), (0, 4), (2, 4), (6, 10)]

    def test_score_is_average_of_searches(self):
        """Test the score equals the mean of the individual searches."""
        pattern = compile_pattern("old man sea")
        text = "the old man and the sea"

        scores = [
            bitap_search(compile_pattern(part), text)[0]
            for part in ["old man sea", "old", "man", "sea"]
        ]
        expected = sum(1.0 if s is None else s for s in scores) / 4

        score, _ = tokenized_search(pattern, text)
        assert score == pytest.approx(expected)

    def test_ranges_are_deduplicated(self):
        """Test that repeated ranges from several searches appear once."""
        _, ranges = tokenized_search(compile_pattern("abc abc"), "abc")

        assert len(ranges) == len(set(ranges))

    def test_no_match(self):
        """Test that an average of 1.0 is reported as no match."""
        assert tokenized_search(compile_pattern("xyz qqq"), "abc") is None

    def test_single_word(self):
        """Test a single-word pattern averages the same search twice."""
        score, _ = tokenized_search(compile_pattern("abc"), "abd")

        assert score == pytest.approx(1 / 3)

    def test_word_patterns_are_cached(self):
        """Test repeated searches with one pattern compile its words once."""
        pattern = compile_pattern("old man")
        word_patterns.cache_clear()

        first = tokenized_search(pattern, "the old man")
        second = tokenized_search(pattern, "the old man")

        assert first == second
        assert word_patterns.cache_info().misses == 1
        assert word_patterns.cache_info().hits == 1

    def test_word_patterns(self):
        """Test each whitespace-separated word is compiled on its own."""
        words = word_patterns("Old  Man", False)

        assert [word.text for word in words] == ["old", "man"]
