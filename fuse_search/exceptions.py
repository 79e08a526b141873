"""Exception hierarchy for the fuzzy search engine."""

from typing import Any, Dict, Optional


class FuseSearchError(Exception):
    """Base exception for all fuse_search errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}


class EmptyPatternError(FuseSearchError, ValueError):
    """Raised when compiling a pattern from an empty string.

    An empty pattern can never match anything, so callers should treat this
    as "no match" rather than as a failure.
    """

    def __init__(self) -> None:
        super().__init__("Pattern cannot be empty")


class PatternTooLongError(FuseSearchError, ValueError):
    """Raised when a pattern exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(
            f"Pattern length {length} exceeds maximum of {max_length}",
            context={"length": length, "max_length": max_length},
        )
        self.length = length
        self.max_length = max_length
