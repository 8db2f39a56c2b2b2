"""Sentence lookup by word."""

from textanalysis.sentences import split_sentences
from textanalysis.words import iter_tokens, normalize_word


def contains_word(sentence: str, word: str) -> bool:
    """Check whether any token of a sentence normalizes to word.

    Args:
        sentence: Sentence text, one or more whitespace-separated tokens.
        word: Normalized word to look for.

    Returns:
        True if the sentence contains the word, False otherwise.
    """
    if not word:
        return False
    return any(normalize_word(token) == word for token in iter_tokens(sentence))


def last_occurrence(text: str, word: str) -> str:
    """Find the last sentence in text that contains a given word.

    The whole text is scanned; a later match replaces an earlier one.

    Args:
        text: Source text.
        word: Word to search for, already normalized (see normalize_word).

    Returns:
        The last matching sentence as written in the text, or "" if no
        sentence contains the word.
    """
    last_match = ""
    for sentence in split_sentences(text):
        if contains_word(sentence, word):
            last_match = sentence
    return last_match
