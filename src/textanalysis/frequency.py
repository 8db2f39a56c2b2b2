"""Word frequency aggregation."""

from textanalysis.words import iter_tokens, normalize_word


class FrequencyBuilder:
    """Incrementally builds a word frequency mapping.

    Accumulates tokens via add(), then call build() to get the mapping.
    Keys keep the order in which words were first seen.
    """

    def __init__(self) -> None:
        self._frequency: dict[str, int] = {}
        self._built = False

    def add(self, token: str) -> None:
        """Add a token, normalizing it first.

        Tokens that normalize to "" (pure punctuation) are silently ignored.

        Args:
            token: A whitespace-delimited token.

        Raises:
            RuntimeError: If build() has already been called.
        """
        if self._built:
            raise RuntimeError("Cannot add tokens after build() has been called")

        word = normalize_word(token)
        if not word:
            return
        self._frequency[word] = self._frequency.get(word, 0) + 1

    def build(self) -> dict[str, int]:
        """Return the accumulated frequency mapping.

        This is a terminal operation; further add() or build() calls raise
        RuntimeError.

        Returns:
            Mapping of normalized word to occurrence count (>= 1).

        Raises:
            RuntimeError: If build() has already been called.
        """
        if self._built:
            raise RuntimeError("build() has already been called")
        self._built = True
        return dict(self._frequency)


def build_frequencies(text: str) -> dict[str, int]:
    """Count how often each normalized word occurs in text.

    Hyphenated and compound words ("e-mail") count as a single word.

    Args:
        text: Input text.

    Returns:
        Mapping of normalized word to count, in first-occurrence order.
    """
    builder = FrequencyBuilder()
    for token in iter_tokens(text):
        builder.add(token)
    return builder.build()
