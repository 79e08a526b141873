"""Bounded-error bit-parallel (Bitap) approximate matching."""

from typing import List, Optional, Sequence, Tuple

from .normalizer import TextNormalizer
from .pattern import Pattern
from .ranges import Range, find_ranges
from .scoring import calculate_score

# Score reported for a candidate with no acceptable match
NO_MATCH_SCORE = 1.0

BitapResult = Tuple[Optional[float], List[Range]]


def _bit_at(row: Sequence[int], index: int) -> int:
    return row[index] if index < len(row) else 0


def _refine_threshold(
    pattern: Pattern,
    text: str,
    location: int,
    distance: int,
    threshold: float,
) -> float:
    """
    Tighten the threshold using literal occurrences of the pattern near `location`.

    An exact substring hit bounds the best achievable score, which lets the
    bit-parallel pass prune earlier.
    """
    index = text.find(pattern.text, location)
    if index == -1:
        return threshold

    threshold = min(threshold, calculate_score(pattern.text, 0, location, index, distance))

    # Last occurrence starting at or before location + pattern length
    index = text.rfind(pattern.text, 0, location + 2 * pattern.length)
    if index != -1:
        threshold = min(threshold, calculate_score(pattern.text, 0, location, index, distance))

    return threshold


def bitap_search(
    pattern: Pattern,
    text: str,
    location: int = 0,
    distance: int = 100,
    threshold: float = 0.6,
) -> BitapResult:
    """
    Search for an approximate occurrence of `pattern` in `text`.

    Each outer iteration allows one more error. A binary search narrows the
    window of text around `location` that can still score within the
    threshold at that error level, then a Bitap row is computed over the
    window from right to left.

    Args:
        pattern: Compiled pattern
        text: Candidate text
        location: Expected offset of the match
        distance: Drift from `location` that scores as a complete mismatch
        threshold: Maximum acceptable score

    Returns:
        Tuple of (best score or None when nothing was accepted, ranges). The
        ranges cover every text character present in the pattern alphabet,
        whether or not a match was accepted.
    """
    text = TextNormalizer(pattern.case_sensitive).normalize(text)
    text_length = len(text)

    if pattern.text == text:
        return 0.0, [(0, text_length - 1)]

    pattern_text = pattern.text
    pattern_length = pattern.length
    alphabet = pattern.alphabet
    completion_mask = pattern.mask

    threshold = _refine_threshold(pattern, text, location, distance, threshold)

    best_score: Optional[float] = None
    match_mask = [0] * text_length
    bin_max = pattern_length + text_length
    last_row: List[int] = []

    for i in range(pattern_length):
        # How far from location can a match stray at this error level
        bin_min = 0
        bin_mid = bin_max
        while bin_min < bin_mid:
            if calculate_score(pattern_text, i, location, location + bin_mid, distance) <= threshold:
                bin_min = bin_mid
            else:
                bin_max = bin_mid
            bin_mid = (bin_max - bin_min) // 2 + bin_min

        # The window only shrinks at higher error levels
        bin_max = bin_mid
        start = max(1, location - bin_mid + 1)
        finish = min(location + bin_mid, text_length) + pattern_length

        row = [0] * (finish + 2)
        row[finish + 1] = (1 << i) - 1

        if start > finish:
            continue

        for j in range(finish, start - 1, -1):
            current_location = j - 1

            if current_location < text_length:
                char_match = alphabet.get(text[current_location], 0)
            else:
                char_match = 0

            if char_match:
                match_mask[current_location] = 1

            # Exact pass
            row[j] = ((row[j + 1] << 1) | 1) & char_match

            # Insertions, deletions and substitutions from the previous error level
            if i > 0:
                previous = _bit_at(last_row, j + 1)
                row[j] |= (((previous | _bit_at(last_row, j)) << 1) | 1) | previous

            if row[j] & completion_mask:
                score = calculate_score(pattern_text, i, location, current_location, distance)

                if score <= threshold:
                    threshold = score
                    best_score = score

                    if current_location <= location:
                        # Already passed location, nothing further left can score better
                        break

        # No hope for a better match at greater error levels
        if calculate_score(pattern_text, i + 1, location, location, distance) > threshold:
            break

        last_row = row

    return best_score, find_ranges(match_mask)
