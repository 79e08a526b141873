"""Pattern compilation for the Bitap search."""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import EmptyPatternError, PatternTooLongError
from .normalizer import TextNormalizer


class Pattern(BaseModel):
    """Compiled, immutable search pattern.

    A pattern is built once and can be shared by any number of searches,
    including concurrent ones.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Normalized pattern text")
    length: int = Field(..., ge=1, description="Number of characters in the pattern")
    mask: int = Field(..., description="Completion bit, set at position length - 1")
    alphabet: Mapping[str, int] = Field(..., description="Character to position bitmask")
    case_sensitive: bool = Field(default=False, description="Whether the text was case folded")

    @field_validator("alphabet")
    @classmethod
    def freeze_alphabet(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        """Wrap the alphabet in a read-only view."""
        return MappingProxyType(dict(v))


def calculate_pattern_alphabet(pattern: str) -> Dict[str, int]:
    """
    Build the Bitap alphabet for a pattern.

    Bit `i` of a character's mask (counting from the least significant bit at
    the last pattern character) is set when the character occurs at offset
    `len(pattern) - 1 - i`.

    Args:
        pattern: Normalized pattern text

    Returns:
        Mapping of each distinct character to its position bitmask
    """
    length = len(pattern)
    alphabet: Dict[str, int] = {}

    for i, char in enumerate(pattern):
        alphabet[char] = alphabet.get(char, 0) | (1 << (length - i - 1))

    return alphabet


def compile_pattern(
    text: str,
    case_sensitive: bool = False,
    max_length: Optional[int] = None,
) -> Pattern:
    """
    Compile raw query text into a reusable pattern.

    Args:
        text: Raw pattern text
        case_sensitive: Disable case folding
        max_length: Reject patterns longer than this (unlimited if None)

    Returns:
        Compiled pattern

    Raises:
        EmptyPatternError: If the text is empty
        PatternTooLongError: If the text exceeds `max_length`
    """
    normalized = TextNormalizer(case_sensitive).normalize(text or "")
    length = len(normalized)

    if length == 0:
        raise EmptyPatternError()

    if max_length is not None and length > max_length:
        raise PatternTooLongError(length, max_length)

    return Pattern(
        text=normalized,
        length=length,
        mask=1 << (length - 1),
        alphabet=calculate_pattern_alphabet(normalized),
        case_sensitive=case_sensitive,
    )
