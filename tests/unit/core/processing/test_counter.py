from __future__ import annotations

"""
Unit tests for word frequency aggregation.
"""

from tagcloud.core.processing.counter import count_words, total_occurrences


def test_count_words_scenario(sample_lines) -> None:
    """Two-line scenario produces the expected mapping."""
    terms = count_words(sample_lines)
    assert terms == {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


def test_count_words_is_case_insensitive() -> None:
    terms = count_words(["Cat cat", "CAT"])
    assert terms == {"cat": 3}


def test_count_words_empty_inputs() -> None:
    assert count_words([]) == {}
    assert count_words([""]) == {}


def test_separator_only_lines_contribute_nothing() -> None:
    assert count_words(["... ,,, !!!", "\n", "word"]) == {"word": 1}


def test_words_spanning_punctuation_are_split() -> None:
    terms = count_words(["well-known e-mail don't"])
    assert terms == {"well": 1, "known": 1, "e": 1, "mail": 1, "don": 1, "t": 1}


def test_count_words_accepts_generators() -> None:
    terms = count_words(line for line in ["a b", "b"])
    assert terms == {"a": 1, "b": 2}


def test_total_occurrences() -> None:
    assert total_occurrences({"the": 3, "cat": 2}) == 5
    assert total_occurrences({}) == 0
