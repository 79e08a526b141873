"""Main search engine implementation."""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Union

import structlog

from ..config import Settings, get_settings
from ..exceptions import EmptyPatternError
from ..models.request import SearchOptions
from ..models.response import MatchResult, SearchResult
from .bitap import bitap_search
from .pattern import Pattern, compile_pattern
from .tokens import tokenized_search

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Fuzzy search engine holding an immutable set of search options.

    The engine keeps no per-search state, so one instance can serve
    concurrent searches.
    """

    def __init__(
        self,
        options: Optional[SearchOptions] = None,
        max_pattern_length: Optional[int] = None,
        max_workers: Optional[int] = None,
        **overrides,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            options: Search options (defaults if None)
            max_pattern_length: Reject patterns longer than this
            max_workers: Thread pool size for parallel batch searches
            **overrides: Individual option values, e.g. ``threshold=0.3``
        """
        options = options or SearchOptions()
        if overrides:
            options = SearchOptions(**{**options.model_dump(), **overrides})

        self.options = options
        self.max_pattern_length = max_pattern_length
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SearchEngine":
        """Create an engine configured from application settings."""
        settings = settings or get_settings()
        options = SearchOptions(
            location=settings.location,
            distance=settings.distance,
            threshold=settings.threshold,
            case_sensitive=settings.case_sensitive,
            tokenize=settings.tokenize,
        )
        return cls(
            options,
            max_pattern_length=settings.max_pattern_length,
            max_workers=settings.batch_max_workers,
        )

    def create_pattern(self, text: str) -> Pattern:
        """
        Compile a pattern for repeated searches.

        Args:
            text: Pattern text

        Returns:
            Compiled pattern

        Raises:
            EmptyPatternError: If the text is empty
        """
        pattern = compile_pattern(
            text,
            case_sensitive=self.options.case_sensitive,
            max_length=self.max_pattern_length,
        )
        logger.debug("pattern_compiled", length=pattern.length, distinct_chars=len(pattern.alphabet))
        return pattern

    def search(self, pattern: Optional[Pattern], text: str) -> Optional[MatchResult]:
        """
        Search for a compiled pattern in a text.

        Args:
            pattern: Pattern from `create_pattern`; None never matches
            text: Text to search in

        Returns:
            MatchResult, or None if the pattern was not found
        """
        if pattern is None:
            return None

        options = self.options

        if options.tokenize:
            result = tokenized_search(
                pattern, text, options.location, options.distance, options.threshold
            )
            if result is None:
                return None
            score, ranges = result
        else:
            score, ranges = bitap_search(
                pattern, text, options.location, options.distance, options.threshold
            )
            if score is None:
                return None

        return MatchResult(score=score, ranges=ranges)

    def search_text(self, text: str, candidate: str) -> Optional[MatchResult]:
        """
        Search for a pattern string in a candidate string.

        Compiles the pattern on every call; use `create_pattern` and `search`
        when the same pattern is matched against many strings.

        Args:
            text: Pattern text
            candidate: Text to search in

        Returns:
            MatchResult, or None if the pattern was not found
        """
        try:
            pattern = self.create_pattern(text)
        except EmptyPatternError:
            logger.debug("empty_pattern_skipped")
            return None

        return self.search(pattern, candidate)

    def search_many(
        self,
        text: Union[str, Pattern],
        candidates: Sequence[str],
        parallel: bool = False,
    ) -> List[SearchResult]:
        """
        Search for a pattern in each of the candidate strings.

        Args:
            text: Pattern text, or a pattern from `create_pattern`
            candidates: Strings to search in
            parallel: Dispatch candidates across a thread pool

        Returns:
            Matching candidates ordered by ascending score; ties keep input order
        """
        if isinstance(text, Pattern):
            pattern = text
        else:
            try:
                pattern = self.create_pattern(text)
            except EmptyPatternError:
                logger.debug("empty_pattern_skipped", total_candidates=len(candidates))
                return []

        if parallel and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                matches = list(executor.map(lambda item: self.search(pattern, item), candidates))
        else:
            matches = [self.search(pattern, item) for item in candidates]

        results = [
            SearchResult(index=index, score=match.score, ranges=match.ranges)
            for index, match in enumerate(matches)
            if match is not None
        ]

        # sort() is stable, so equal scores stay in candidate order
        results.sort(key=lambda result: result.score)

        logger.debug(
            "batch_search_completed",
            total_candidates=len(candidates),
            total_results=len(results),
            parallel=parallel,
        )
        return results
