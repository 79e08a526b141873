"""Performance benchmarks for Fuse Search."""

import random
import string
import time

import pytest
from fuse_search.core.engine import SearchEngine


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture
    def engine(self):
        """Create a search engine with default options."""
        return SearchEngine()

    @pytest.fixture
    def large_candidates(self):
        """Generate a large set of candidate strings."""
        rng = random.Random(42)
        candidates = [
            "".join(rng.choice(string.ascii_lowercase + " ") for _ in range(40))
            for _ in range(1000)
        ]
        candidates.extend(["start date", "end date", "created at", "updated at"])
        return candidates

    def test_exact_match_performance(self, engine, benchmark):
        """Benchmark the exact match short-circuit."""
        pattern = engine.create_pattern("start date")

        result = benchmark(engine.search, pattern, "start date")
        assert result.score == 0.0

    def test_fuzzy_match_performance(self, engine, benchmark):
        """Benchmark a single fuzzy search in a sentence."""
        pattern = engine.create_pattern("strt date")
        text = "the report covers the start date and the end date of the project"

        result = benchmark(engine.search, pattern, text)
        assert result is not None

    def test_tokenized_performance(self, benchmark):
        """Benchmark tokenized search."""
        engine = SearchEngine(tokenize=True)
        pattern = engine.create_pattern("end date project")
        text = "the report covers the start date and the end date of the project"

        result = benchmark(engine.search, pattern, text)
        assert result is not None

    def test_batch_search_performance(self, engine, large_candidates):
        """Test a batch over many candidates completes in reasonable time."""
        start_time = time.time()
        results = engine.search_many("start date", large_candidates)
        total_time = time.time() - start_time

        assert results[0].score == 0.0
        assert large_candidates[results[0].index] == "start date"
        assert total_time < 10.0

    def test_parallel_batch_consistency(self, engine, large_candidates):
        """Test the parallel batch path on a large input."""
        sequential = engine.search_many("updated", large_candidates)
        parallel = engine.search_many("updated", large_candidates, parallel=True)

        assert parallel == sequential
