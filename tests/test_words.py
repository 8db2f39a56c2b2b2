"""Tests for tokenization and word normalization."""

import pytest

from textanalysis.words import count_words, iter_tokens, normalize_word


class TestNormalizeWord:
    """Tests for normalize_word."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("Word,", "word"),
            ('"word', "word"),
            ('"WORD,"', "word"),
            ("(Hello!)", "hello"),
            ("...end", "end"),
            ("3.14,", "3.14"),
            ("ÉCOLE", "école"),
        ],
    )
    def test_strips_outer_punctuation_and_lowercases(self, token: str, expected: str) -> None:
        assert normalize_word(token) == expected

    def test_keeps_inner_punctuation(self) -> None:
        """Hyphenated words stay a single unit."""
        assert normalize_word("one-two") == "one-two"
        assert normalize_word("don't") == "don't"

    @pytest.mark.parametrize("token", ["---", "", "!?", "  ", "«»"])
    def test_no_alphanumerics_gives_empty(self, token: str) -> None:
        assert normalize_word(token) == ""

    @pytest.mark.parametrize("token", ["½", "²", "Ⅻ", "(½)"])
    def test_numeric_symbols_are_not_digits(self, token: str) -> None:
        """Only letters and decimal digits count, not fractions or numerals."""
        assert normalize_word(token) == ""

    def test_numeric_symbols_kept_inside_word(self) -> None:
        assert normalize_word("x²y,") == "x²y"

    def test_case_insensitive(self) -> None:
        assert normalize_word("Word") == normalize_word("word") == "word"

    def test_lowercasing_before_stripping(self) -> None:
        """"İ" lowercases to "i" plus a combining dot, which is stripped."""
        assert normalize_word("İ") == "i"

    @pytest.mark.parametrize(
        "token",
        ["Word,", "--A--", "x", "", "!!", "Mr.", "e-mail;", "İ", "İSTANBUL", "Σ."],
    )
    def test_idempotent(self, token: str) -> None:
        once = normalize_word(token)
        assert normalize_word(once) == once


class TestIterTokens:
    """Tests for iter_tokens."""

    def test_splits_on_any_whitespace(self) -> None:
        assert list(iter_tokens(" a\tb\n\nc  d ")) == ["a", "b", "c", "d"]

    def test_tokens_are_not_normalized(self) -> None:
        assert list(iter_tokens('"Hello," -- World.')) == ['"Hello,"', "--", "World."]

    def test_empty_text(self) -> None:
        assert list(iter_tokens("")) == []


class TestCountWords:
    """Tests for count_words."""

    def test_sample_text(self, sample_text: str) -> None:
        assert count_words(sample_text) == 9

    def test_empty_text(self) -> None:
        assert count_words("") == 0

    def test_whitespace_only(self) -> None:
        assert count_words(" \t\n ") == 0

    def test_punctuation_tokens_are_counted(self) -> None:
        """Word count does not normalize, unlike frequencies."""
        assert count_words("-- hello !!") == 3

    @pytest.mark.parametrize(
        "text",
        ["one", "one two", "  spaced   out\ttext\n", "a\nb\nc\n"],
    )
    def test_matches_whitespace_split(self, text: str) -> None:
        assert count_words(text) == len(text.split())
