from projects_demo.application.queries.wordcount.rank_words_query import (
    RankWordsQuery,
)

__all__ = ["RankWordsQuery"]
