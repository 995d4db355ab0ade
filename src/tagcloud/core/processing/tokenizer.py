from __future__ import annotations

"""
Separator-Based Line Tokenizer.

Splits a line of text into alternating maximal runs of separator and
word characters. Separator runs are kept as tokens so that the sequence
of tokens always reconstructs the original line exactly.
"""

from typing import AbstractSet, Iterator

from tagcloud.domain.constants import SEPARATORS

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def next_element(text: str, start: int, separators: AbstractSet[str] = SEPARATORS) -> str:
    """
    Return the maximal run beginning at 'start' with uniform classification.

    Every character of the returned run has the same separator membership
    as text[start]. An empty string is returned when 'start' is at or past
    the end of the text.

    Args:
        text: The line to scan.
        start: Offset where the run begins.
        separators: Characters considered as word delimiters.

    Returns:
        str: The next word or separator run.
    """
    if start >= len(text):
        return ""

    is_separator = text[start] in separators
    end = start + 1
    while end < len(text) and (text[end] in separators) == is_separator:
        end += 1

    return text[start:end]


def iter_tokens(text: str, separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
    """
    Partition a line into consecutive tokens, left to right.

    Args:
        text: The line to tokenize.
        separators: Characters considered as word delimiters.

    Yields:
        str: Word and separator runs, in order of appearance.
    """
    position = 0
    while position < len(text):
        element = next_element(text, position, separators)
        position += len(element)
        yield element


def is_word(token: str, separators: AbstractSet[str] = SEPARATORS) -> bool:
    """A token is a word when its first character is not a separator."""
    return bool(token) and token[0] not in separators
