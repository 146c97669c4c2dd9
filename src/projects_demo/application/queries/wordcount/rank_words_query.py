"""Rank the most frequent words of a text."""

from __future__ import annotations

import logging

from projects_demo.domain.wordcount import (
    STORY,
    RankingStrategy,
    WordCount,
    rank,
)

logger = logging.getLogger(__name__)


class RankWordsQuery:
    """Query the top-N words of a fixed text with a chosen strategy."""

    def __init__(self, strategy: RankingStrategy, text: str = STORY):
        self._strategy = strategy
        self._text = text

    def execute(self, limit: int) -> list[WordCount]:
        result = rank(self._text, limit, strategy=self._strategy)
        logger.debug(
            "Ranked %d word(s) with %s strategy (limit=%d)",
            len(result),
            self._strategy.value,
            limit,
        )
        return result
