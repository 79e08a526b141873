"""
Fuse Search - approximate string matching with match highlighting.

This package finds where a pattern approximately occurs in a text using a
location-aware Bitap search, scores the match between 0.0 (exact) and 1.0
(no match), and reports the character ranges that matched.
"""

__version__ = "0.1.0"

from .core.engine import SearchEngine
from .core.pattern import Pattern
from .exceptions import EmptyPatternError, FuseSearchError, PatternTooLongError
from .models.request import SearchOptions
from .models.response import MatchResult, SearchResult

__all__ = [
    "SearchEngine",
    "SearchOptions",
    "Pattern",
    "MatchResult",
    "SearchResult",
    "FuseSearchError",
    "EmptyPatternError",
    "PatternTooLongError",
]
