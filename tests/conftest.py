"""Pytest fixtures for textanalysis tests."""

from pathlib import Path

import pytest

SAMPLE_TEXT = "The cat sat. The dog ran! Cats are cute."


@pytest.fixture
def sample_text() -> str:
    """Three short sentences where "the" is the only repeated word."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Write SAMPLE_TEXT to a file.

    Returns:
        Path to the created text file.
    """
    path = tmp_path / "passage.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def empty_text_file(tmp_path: Path) -> Path:
    """Create an empty text file.

    Returns:
        Path to the created text file.
    """
    path = tmp_path / "empty.txt"
    path.touch()
    return path
