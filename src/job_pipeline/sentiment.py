# ========================
# src/job_pipeline/sentiment.py
# ========================

"""
Sentiment Scoring Module

Counts lexicon-matched tokens per emotion and polarity category. Every token
found in the lexicon adds one to each of its categories; there is no
weighting, negation handling or context sensitivity.
"""

import re
import logging
from collections import OrderedDict
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .lexicon import EMOTION_LEXICON, SENTIMENT_CATEGORIES
from .table import JobTable

logger = logging.getLogger(__name__)

COLUMN_PREFIX = "sentiment_"
SENTIMENT_COLUMNS = tuple(COLUMN_PREFIX + category for category in SENTIMENT_CATEGORIES)

_TOKEN_SPLIT = re.compile(r"\W+")


def tokenize(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [token for token in _TOKEN_SPLIT.split(text.lower()) if token]


def score_text(text: Optional[str],
               lexicon: Mapping[str, Sequence[str]] = EMOTION_LEXICON) -> Dict[str, int]:
    """
    Score one text against the lexicon.

    Returns:
        OrderedDict: category -> count, in taxonomy order
    """
    scores = OrderedDict((category, 0) for category in SENTIMENT_CATEGORIES)
    for token in tokenize(text):
        for category in lexicon.get(token, ()):
            scores[category] += 1
    return scores


class SentimentScorer:
    """
    Appends one count column per sentiment category to a table.
    """

    def __init__(self, lexicon: Mapping[str, Sequence[str]] = EMOTION_LEXICON):
        self.lexicon = lexicon
        self._scores: List[Dict[str, int]] = []
        logger.info(f"SentimentScorer initialized with {len(self.lexicon)} lexicon entries")

    def begin(self, table: JobTable) -> None:
        table.require_columns(['job_description'], stage="sentiment scoring")
        self._scores = []

    def process_chunk(self, chunk: List[Dict[str, Any]]) -> None:
        for row in chunk:
            self._scores.append(score_text(row.get('job_description'), self.lexicon))

    def finish(self, table: JobTable) -> None:
        for category, column in zip(SENTIMENT_CATEGORIES, SENTIMENT_COLUMNS):
            table.add_column(column, [scores[category] for scores in self._scores])
        logger.info(f"Scored sentiment for {len(table)} descriptions")

    def score_table(self, table: JobTable) -> JobTable:
        self.begin(table)
        self.process_chunk(table.rows)
        self.finish(table)
        return table


def sentiment_totals(table: JobTable) -> Dict[str, int]:
    """Sum each sentiment column across all rows."""
    totals = OrderedDict()
    for category, column in zip(SENTIMENT_CATEGORIES, SENTIMENT_COLUMNS):
        if table.has_column(column):
            totals[category] = sum(value or 0 for value in table.column(column))
    return totals
