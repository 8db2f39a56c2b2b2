"""End-to-end analysis of a text."""

import logging

from textanalysis.config import DEFAULT_TOP_N, AnalysisConfig
from textanalysis.frequency import build_frequencies
from textanalysis.models import AnalysisReport
from textanalysis.ranking import top_words
from textanalysis.search import last_occurrence
from textanalysis.source import read_source
from textanalysis.words import count_words

logger = logging.getLogger(__name__)


def analyze_text(text: str, top_n: int = DEFAULT_TOP_N) -> AnalysisReport:
    """Count words, rank them, and find where the top word last appears.

    If the text contains no words, the ranking is empty and the
    last-occurrence search is skipped (most_frequent and last_sentence are
    None).

    Args:
        text: Source text.
        top_n: Number of most frequent words to report.

    Returns:
        AnalysisReport for the text.
    """
    word_count = count_words(text)
    frequencies = build_frequencies(text)
    ranking = top_words(frequencies, top_n)

    if not ranking:
        logger.debug("No words found in %d tokens; skipping sentence search", word_count)
        return AnalysisReport(
            word_count=word_count,
            frequencies=frequencies,
            top_words=ranking,
            most_frequent=None,
            last_sentence=None,
        )

    most_frequent = ranking[0]
    return AnalysisReport(
        word_count=word_count,
        frequencies=frequencies,
        top_words=ranking,
        most_frequent=most_frequent,
        last_sentence=last_occurrence(text, most_frequent),
    )


def analyze_file(config: AnalysisConfig) -> AnalysisReport:
    """Read the configured source file and analyze it.

    Args:
        config: Source path and top-N cutoff.

    Returns:
        AnalysisReport for the file contents.

    Raises:
        SourceUnavailableError: If the source file cannot be read.
    """
    text = read_source(config.source_path)
    return analyze_text(text, top_n=config.top_n)
