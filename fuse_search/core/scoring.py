"""Match quality scoring for the Bitap search."""


def calculate_score(pattern: str, e: int, x: int, loc: int, distance: int) -> float:
    """
    Compute the score for a match with `e` errors found at `loc`.

    Args:
        pattern: Pattern being sought
        e: Number of errors in the match
        x: Expected location of the match
        loc: Actual location of the match
        distance: How far a match may drift from `x` before it scores as a mismatch

    Returns:
        Score where 0.0 is a perfect match. Values above 1.0 are possible and
        are never clamped; callers only compare against a threshold.
    """
    accuracy = e / len(pattern)
    proximity = abs(x - loc)

    if distance == 0:
        # Only the exact location is acceptable
        return 1.0 if proximity != 0 else accuracy

    return accuracy + proximity / distance
