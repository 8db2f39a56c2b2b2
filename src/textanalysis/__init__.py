"""Word counts, frequencies and sentence lookup for English text."""

from textanalysis.analysis import analyze_file, analyze_text
from textanalysis.config import DEFAULT_TOP_N, AnalysisConfig
from textanalysis.frequency import FrequencyBuilder, build_frequencies
from textanalysis.models import AnalysisReport
from textanalysis.ranking import top_words
from textanalysis.search import contains_word, last_occurrence
from textanalysis.sentences import split_sentences
from textanalysis.source import SourceUnavailableError, read_source
from textanalysis.words import count_words, iter_tokens, normalize_word

__all__ = [
    "AnalysisConfig",
    "AnalysisReport",
    "DEFAULT_TOP_N",
    "FrequencyBuilder",
    "SourceUnavailableError",
    "analyze_file",
    "analyze_text",
    "build_frequencies",
    "contains_word",
    "count_words",
    "iter_tokens",
    "last_occurrence",
    "normalize_word",
    "read_source",
    "split_sentences",
    "top_words",
]
