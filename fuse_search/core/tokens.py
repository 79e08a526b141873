"""Token-averaged matching for multi-word patterns."""

from functools import lru_cache
from typing import List, Optional, Tuple

from .bitap import NO_MATCH_SCORE, bitap_search
from .normalizer import TextNormalizer
from .pattern import Pattern, compile_pattern
from .ranges import Range


@lru_cache(maxsize=256)
def word_patterns(text: str, case_sensitive: bool = False) -> Tuple[Pattern, ...]:
    """
    Compile each whitespace-delimited word of a pattern text.

    Cached so a batch compiles the words once rather than once per candidate.
    """
    normalizer = TextNormalizer(case_sensitive)
    return tuple(compile_pattern(word, case_sensitive) for word in normalizer.tokenize(text))


def tokenized_search(
    pattern: Pattern,
    text: str,
    location: int = 0,
    distance: int = 100,
    threshold: float = 0.6,
) -> Optional[Tuple[float, List[Range]]]:
    """
    Search for the full pattern and each of its words, and average the scores.

    When two candidates match the individual words equally well, the full
    pattern search pushes the one matching best overall to the top.

    Args:
        pattern: Compiled pattern
        text: Candidate text
        location: Expected offset of the match
        distance: Drift from `location` that scores as a complete mismatch
        threshold: Maximum acceptable score

    Returns:
        Tuple of (average score, deduplicated ranges), or None when the
        average is a complete mismatch
    """
    words = word_patterns(pattern.text, pattern.case_sensitive)

    total_score = 0.0
    ranges: List[Range] = []

    for sub_pattern in (pattern,) + words:
        score, sub_ranges = bitap_search(sub_pattern, text, location, distance, threshold)
        total_score += NO_MATCH_SCORE if score is None else score
        ranges.extend(sub_ranges)

    average = total_score / (len(words) + 1)
    if average == NO_MATCH_SCORE:
        return None

    # Words overlap the full pattern, so the same range can show up repeatedly
    return average, list(dict.fromkeys(ranges))
