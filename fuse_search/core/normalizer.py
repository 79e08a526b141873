"""Text normalization utilities shared by pattern compilation and search."""

from typing import List


class TextNormalizer:
    """Handles case folding and whitespace tokenization."""

    def __init__(self, case_sensitive: bool = False) -> None:
        """
        Initialize the normalizer.

        Args:
            case_sensitive: When True, text is compared exactly as given
        """
        self.case_sensitive = case_sensitive

    def normalize(self, text: str) -> str:
        """
        Normalize text for comparison.

        The result always has the same length as the input, so character
        positions found in normalized text map back onto the original.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text
        """
        if self.case_sensitive or not text:
            return text

        lowered = text.lower()
        if len(lowered) == len(text):
            return lowered

        # Some characters expand when lowercased (e.g. "İ"); keep those as-is
        return "".join(self._fold_char(char) for char in text)

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into whitespace-delimited tokens.

        Args:
            text: Input text

        Returns:
            List of non-empty tokens
        """
        if not text:
            return []

        return text.split()

    @staticmethod
    def _fold_char(char: str) -> str:
        lowered = char.lower()
        return lowered if len(lowered) == 1 else char
