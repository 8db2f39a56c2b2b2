"""Whitespace tokenization and word normalization."""

from collections.abc import Generator


def iter_tokens(text: str) -> Generator[str, None, None]:
    """Yield whitespace-delimited tokens from text, in document order.

    Args:
        text: Input text.

    Yields:
        Non-empty tokens exactly as written (no normalization).
    """
    yield from text.split()


def normalize_word(token: str) -> str:
    """Convert a token to its comparison form.

    The token is lowercased, then leading and trailing characters that are
    neither letters nor decimal digits are removed, so that "Word," and
    '"word' are the same word. Punctuation inside the token is kept
    ("one-two" stays "one-two").

    Args:
        token: A whitespace-delimited token.

    Returns:
        The normalized word, or "" if the token has no letters or digits.
    """
    # Lowercase first: lower() can append combining marks ("İ" -> "i̇")
    word = token.lower()
    start = 0
    end = len(word)

    while start < end and not _is_letter_or_digit(word[start]):
        start += 1
    while end > start and not _is_letter_or_digit(word[end - 1]):
        end -= 1

    return word[start:end]


def _is_letter_or_digit(char: str) -> bool:
    """Check for a Unicode letter or decimal digit (not "½", "²" or "Ⅻ")."""
    return char.isalpha() or char.isdecimal()


def count_words(text: str) -> int:
    """Count the words in a piece of text (not the number of unique words).

    Punctuation-only tokens such as "--" still count as words here.

    Args:
        text: Input text.

    Returns:
        Number of whitespace-delimited tokens.
    """
    return sum(1 for _ in iter_tokens(text))
