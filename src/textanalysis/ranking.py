"""Top-N word ranking."""

from collections.abc import Mapping


def top_words(frequencies: Mapping[str, int], n: int) -> list[str]:
    """Return the n most frequent words, most frequent first.

    Words with equal counts keep the mapping's iteration order, which for
    build_frequencies() is the order of first occurrence in the text.

    Args:
        frequencies: Mapping of word to occurrence count.
        n: Number of words wanted. Values <= 0 give an empty list; values
            larger than the mapping return every word.

    Returns:
        Up to n words sorted by count (descending).
    """
    if n <= 0:
        return []
    # sorted() is stable, so ties stay in insertion order
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:n]]
