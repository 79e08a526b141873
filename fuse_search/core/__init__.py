"""Core fuzzy matching functionality."""

from .bitap import NO_MATCH_SCORE, bitap_search
from .engine import SearchEngine
from .normalizer import TextNormalizer
from .pattern import Pattern, calculate_pattern_alphabet, compile_pattern
from .ranges import Range, find_ranges
from .scoring import calculate_score
from .tokens import tokenized_search, word_patterns

__all__ = [
    "SearchEngine",
    "Pattern",
    "compile_pattern",
    "calculate_pattern_alphabet",
    "calculate_score",
    "find_ranges",
    "bitap_search",
    "tokenized_search",
    "word_patterns",
    "TextNormalizer",
    "Range",
    "NO_MATCH_SCORE",
]
