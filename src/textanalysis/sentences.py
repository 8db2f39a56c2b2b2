"""Punctuation-based sentence splitting."""

import re
from collections.abc import Generator

# Runs of text between end-of-sentence punctuation. The splitter has no
# lookahead, so "Mr. Smith" and "3.14" are split too.
_SENTENCE_RE = re.compile(r"[^.?!]+")


def split_sentences(text: str, *, skip_blank: bool = True) -> Generator[str, None, None]:
    """Split text into sentences on ".", "?" and "!".

    The terminator is not part of the yielded sentence, and the sentence is
    returned as written (casing and surrounding whitespace preserved).

    Args:
        text: Input text to split.
        skip_blank: If True (default), skip sentences made only of whitespace,
            e.g. the gap between "end. " and the next terminator.

    Yields:
        Sentences in document order.
    """
    for match in _SENTENCE_RE.finditer(text):
        sentence = match.group()
        if skip_blank and not sentence.strip():
            continue
        yield sentence
