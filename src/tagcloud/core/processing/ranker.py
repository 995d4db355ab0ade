from __future__ import annotations

"""
Two-Phase Word Ranking.

Selects the N most frequent words and puts them in presentation order:

1. Order every entry by count, descending. Equal counts are ordered by
   word, ascending, so the selection at the N-th position is always the
   same for the same input.
2. Keep the first N entries (all of them when N exceeds the number of
   distinct words).
3. Re-order the kept entries alphabetically by word (Unicode code point
   order of the lowercased text).

The source mapping is only read, never modified.
"""

from typing import Dict, Iterable, List

from tagcloud.domain.errors import InvalidConfigurationError
from tagcloud.domain.models import RankedEntry

# -----------------------------------------------------------------------------
# ORDERING PHASES
# -----------------------------------------------------------------------------

def sort_by_count(terms: Dict[str, int]) -> List[RankedEntry]:
    """
    Order all entries by descending count, then ascending word.

    Args:
        terms: Word frequency mapping.

    Returns:
        List[RankedEntry]: Total order over all entries.
    """
    ordered = sorted(terms.items(), key=lambda item: (-item[1], item[0]))
    return [RankedEntry(word=word, count=count) for word, count in ordered]


def sort_alphabetically(entries: Iterable[RankedEntry]) -> List[RankedEntry]:
    """Order entries by word, ascending."""
    return sorted(entries, key=lambda entry: entry.word)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def select_top(entries: List[RankedEntry], n: int) -> List[RankedEntry]:
    """
    Truncate a count-ordered sequence to its first 'n' entries.

    Args:
        entries: Entries in descending count order.
        n: Number of entries to keep (non-negative).

    Returns:
        List[RankedEntry]: At most 'n' entries.

    Raises:
        InvalidConfigurationError: If 'n' is negative.
    """
    if n < 0:
        raise InvalidConfigurationError("word_count", f"must be >= 0, received {n}.")
    return entries[:n]


def rank(terms: Dict[str, int], n: int) -> List[RankedEntry]:
    """
    Select the top 'n' words by frequency, presented alphabetically.

    Args:
        terms: Word frequency mapping.
        n: Number of words to select.

    Returns:
        List[RankedEntry]: min(n, len(terms)) entries in alphabetical order.

    Raises:
        InvalidConfigurationError: If 'n' is negative.
    """
    return sort_alphabetically(select_top(sort_by_count(terms), n))
