"""Word-frequency ranking domain."""

from projects_demo.domain.wordcount.exceptions import InvalidLimitError
from projects_demo.domain.wordcount.ranking import (
    RankingStrategy,
    WordCount,
    build_frequency_table,
    rank,
    tokenize,
)
from projects_demo.domain.wordcount.story import STORY

__all__ = [
    "STORY",
    "InvalidLimitError",
    "RankingStrategy",
    "WordCount",
    "build_frequency_table",
    "rank",
    "tokenize",
]
