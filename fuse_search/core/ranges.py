"""Conversion of match masks into highlight ranges."""

from typing import List, Sequence, Tuple

# Inclusive (start, end) character positions
Range = Tuple[int, int]


def find_ranges(mask: Sequence[int]) -> List[Range]:
    """
    Collapse a 0/1 mask into maximal runs of consecutive 1s.

    >>> find_ranges([0, 1, 1, 0, 1, 1, 1])
    [(1, 2), (4, 6)]

    Args:
        mask: Sequence of 0/1 flags over text positions

    Returns:
        Inclusive ranges ordered by ascending start
    """
    ranges: List[Range] = []
    start = -1

    for i, bit in enumerate(mask):
        if bit and start == -1:
            start = i
        elif not bit and start != -1:
            ranges.append((start, i - 1))
            start = -1

    if start != -1:
        ranges.append((start, len(mask) - 1))

    return ranges
