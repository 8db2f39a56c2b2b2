"""Data models for text analysis results."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class AnalysisReport:
    """Result of analyzing a single text.

    Attributes:
        word_count: Total number of whitespace-delimited tokens.
        frequencies: Mapping of normalized word to count, in first-occurrence order.
        top_words: Most frequent words, most frequent first.
        most_frequent: The top-ranked word, or None if the text has no words.
        last_sentence: Last sentence containing most_frequent, or None if the
            text has no words.
    """

    word_count: int
    frequencies: dict[str, int]
    top_words: list[str]
    most_frequent: str | None
    last_sentence: str | None

    @property
    def has_words(self) -> bool:
        """Whether any token in the text normalized to a word."""
        return self.most_frequent is not None

    def to_dict(self) -> dict[str, Any]:
        """Export the report as a JSON-serializable dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisReport":
        """Load a report from a dictionary produced by to_dict().

        Args:
            data: Dictionary with the report fields.

        Returns:
            AnalysisReport instance.
        """
        return cls(
            word_count=data["word_count"],
            frequencies=dict(data["frequencies"]),
            top_words=list(data["top_words"]),
            most_frequent=data["most_frequent"],
            last_sentence=data["last_sentence"],
        )
