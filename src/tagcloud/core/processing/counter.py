from __future__ import annotations

"""
Word Frequency Aggregation.

Builds the word -> occurrence count mapping over the full input.
Words are case-normalized, so 'Cat', 'cat' and 'CAT' share one entry.
"""

import logging
from typing import AbstractSet, Dict, Iterable

from tagcloud.core.processing.tokenizer import is_word, iter_tokens
from tagcloud.domain.constants import SEPARATORS

logger = logging.getLogger(__name__)


def count_words(
        lines: Iterable[str],
        separators: AbstractSet[str] = SEPARATORS,
) -> Dict[str, int]:
    """
    Count every word occurrence in a sequence of lines.

    Separator runs are discarded. No lines, empty lines or lines made only
    of separators contribute nothing.

    Args:
        lines: Input text, one element per line.
        separators: Characters considered as word delimiters.

    Returns:
        Dict[str, int]: Mapping from lowercased word to its count.
    """
    terms: Dict[str, int] = {}
    line_total = 0

    for line in lines:
        line_total += 1
        for token in iter_tokens(line, separators):
            if not is_word(token, separators):
                continue
            word = token.lower()
            terms[word] = terms.get(word, 0) + 1

    logger.debug(f"Counted {len(terms)} distinct words across {line_total} lines.")
    return terms


def total_occurrences(terms: Dict[str, int]) -> int:
    """Sum of all word occurrences in a frequency mapping."""
    return sum(terms.values())
