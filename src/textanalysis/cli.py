"""CLI for textanalysis: word counts and frequencies for text files."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from textanalysis.analysis import analyze_text
from textanalysis.config import DEFAULT_TOP_N, AnalysisConfig
from textanalysis.models import AnalysisReport
from textanalysis.search import last_occurrence
from textanalysis.source import SourceUnavailableError, read_source
from textanalysis.words import normalize_word

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="textanalysis",
    no_args_is_help=True,
)


@app.callback()
def _callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging."),
    ] = False,
) -> None:
    """Count and rank the words of a text file."""
    # Load .env before subcommand options read their environment defaults
    load_dotenv()
    if verbose:
        logging.getLogger("textanalysis").setLevel(logging.DEBUG)


def _load_text(path: Path) -> str:
    """Read the source file, exiting with a message if it is unavailable."""
    try:
        return read_source(path)
    except SourceUnavailableError as e:
        typer.echo(f"Error: file not found or unreadable: {e.path} ({e.reason})", err=True)
        raise typer.Exit(1) from e


def _print_report(report: AnalysisReport, *, show_counts: bool) -> None:
    """Print a report in the plain-text layout."""
    typer.echo(f"Total words: {report.word_count}")

    if not report.has_words:
        typer.echo("No words found.")
        return

    typer.echo("Most used words are:")
    for word in report.top_words:
        if show_counts:
            typer.echo(f"{word}: {report.frequencies[word]}")
        else:
            typer.echo(word)

    sentence = (report.last_sentence or "").strip()
    if sentence:
        typer.echo(f'The last sentence containing "{report.most_frequent}" is: {sentence}')
    else:
        # Tokens like "e.g" are words but get cut apart by the sentence splitter
        typer.echo(f'No sentence contains "{report.most_frequent}".')


@app.command()
def analyze(
    source: Annotated[
        Path,
        typer.Argument(help="Path to the input text file."),
    ],
    top: Annotated[
        int,
        typer.Option(
            "--top",
            "-t",
            help="Number of most frequent words to show.",
            min=1,
            envvar="TEXTANALYSIS_TOP_N",
        ),
    ] = DEFAULT_TOP_N,
    counts: Annotated[
        bool,
        typer.Option("--counts", "-c", help="Show the count next to each word."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the report as JSON."),
    ] = False,
) -> None:
    """Analyze a text file.

    Prints the total word count, the most frequent words, and the last
    sentence containing the most frequent word.
    """
    config = AnalysisConfig(source_path=source, top_n=top)
    logger.debug("Analyzing %s (top %d)", config.source_path, config.top_n)
    text = _load_text(config.source_path)
    report = analyze_text(text, top_n=config.top_n)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_report(report, show_counts=counts)


@app.command()
def last(
    source: Annotated[
        Path,
        typer.Argument(help="Path to the input text file."),
    ],
    word: Annotated[
        str,
        typer.Argument(help="Word to search for (case and surrounding punctuation ignored)."),
    ],
) -> None:
    """Print the last sentence of a text file that contains a word."""
    text = _load_text(source)
    target = normalize_word(word)
    sentence = last_occurrence(text, target)

    if not sentence:
        typer.echo(f'No sentence contains "{target or word}".')
        raise typer.Exit(1)

    typer.echo(sentence.strip())


def main() -> None:  # pragma: no cover
    """Entry point for the CLI."""
    # Only show warnings unless --verbose is given
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    app()
