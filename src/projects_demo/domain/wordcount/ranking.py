"""Top-N word-frequency ranking.

Every strategy works on the same read-only frequency table and returns the
same result for the same input: entries ordered by count descending, ties
broken by word in lexicographic order, truncated to exactly ``limit``
entries (or fewer when the text has fewer distinct words).
"""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from projects_demo.domain.wordcount.exceptions import InvalidLimitError


@dataclass(frozen=True)
class WordCount:
    """A word together with its number of occurrences."""

    word: str
    count: int


class RankingStrategy(str, Enum):
    """Available ranking implementations."""

    GROUPING = "grouping"
    HEAP = "heap"
    PIPELINE = "pipeline"


def tokenize(text: str) -> list[str]:
    """Split text on whitespace and lowercase every token.

    Punctuation is kept as part of the token.
    """
    return [token.lower() for token in text.split()]


def build_frequency_table(text: str) -> Mapping[str, int]:
    """Count occurrences of each lowercased token in ``text``."""
    counts: dict[str, int] = {}
    for token in tokenize(text):
        counts[token] = counts.get(token, 0) + 1
    return MappingProxyType(counts)


def _sort_key(item: tuple[str, int]) -> tuple[int, str]:
    word, count = item
    return (-count, word)


def _rank_by_grouping(table: Mapping[str, int], limit: int) -> list[WordCount]:
    by_count: dict[int, list[str]] = {}
    for word, count in table.items():
        by_count.setdefault(count, []).append(word)

    ranked: list[WordCount] = []
    for count in sorted(by_count, reverse=True):
        for word in sorted(by_count[count]):
            if len(ranked) == limit:
                return ranked
            ranked.append(WordCount(word=word, count=count))
    return ranked


def _rank_by_heap(table: Mapping[str, int], limit: int) -> list[WordCount]:
    top = heapq.nsmallest(limit, table.items(), key=_sort_key)
    return [WordCount(word=word, count=count) for word, count in top]


def _rank_by_pipeline(table: Mapping[str, int], limit: int) -> list[WordCount]:
    ordered = sorted(Counter(table).items(), key=_sort_key)
    return [WordCount(word=word, count=count) for word, count in ordered[:limit]]


_STRATEGIES = {
    RankingStrategy.GROUPING: _rank_by_grouping,
    RankingStrategy.HEAP: _rank_by_heap,
    RankingStrategy.PIPELINE: _rank_by_pipeline,
}


def rank(
    text: str,
    limit: int,
    strategy: RankingStrategy = RankingStrategy.PIPELINE,
) -> list[WordCount]:
    """Return the ``limit`` most frequent words of ``text``.

    Parameters
    ----------
    text
        Input text; tokens are separated by whitespace and compared
        case-insensitively.
    limit
        Maximum number of entries to return. Must not be negative.
    strategy
        Implementation to use. All strategies produce identical output.

    Returns
    -------
    List of WordCount ordered by count descending, then word ascending.

    Raises
    ------
    InvalidLimitError
        If ``limit`` is negative.
    """
    if limit < 0:
        raise InvalidLimitError(limit)

    table = build_frequency_table(text)
    if limit == 0 or not table:
        return []

    return _STRATEGIES[RankingStrategy(strategy)](table, limit)
