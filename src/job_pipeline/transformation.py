# ========================
# src/job_pipeline/transformation.py
# ========================

"""
Data Transformation Module

Grouped counts over the enriched table for reporting: countries, experience
levels, daily postings, skills, job-title terms and sentiment totals.
"""

import string
import logging
from collections import Counter, OrderedDict
from datetime import date
from typing import Any, Dict, List, Tuple

from .features import EXPERIENCE_LEVELS
from .sentiment import sentiment_totals
from .table import JobTable

logger = logging.getLogger(__name__)

ENGLISH_STOPWORDS = frozenset("""
i me my myself we our ours ourselves you your yours yourself yourselves he him
his himself she her hers herself it its itself they them their theirs
themselves what which who whom this that these those am is are was were be
been being have has had having do does did doing would should could ought
i'm you're he's she's it's we're they're i've you've we've they've i'd you'd
he'd she'd we'd they'd i'll you'll he'll she'll we'll they'll isn't aren't
wasn't weren't hasn't haven't hadn't doesn't don't didn't won't wouldn't
shan't shouldn't can't cannot couldn't mustn't let's that's who's what's
here's there's when's where's why's how's a an the and but if or because as
until while of at by for with about against between into through during
before after above below to from up down in out on off over under again
further then once here there when where why how all any both each few more
most other some such no nor not only own same so than too very
""".split())

_STRIP_PUNCTUATION = str.maketrans("", "", string.punctuation)
_STRIP_DIGITS = str.maketrans("", "", string.digits)

SKILL_SEPARATOR = ", "


def title_tokens(title: Any) -> List[str]:
    """Normalize a job title into word-cloud terms."""
    if not isinstance(title, str):
        return []
    text = title.lower().translate(_STRIP_PUNCTUATION).translate(_STRIP_DIGITS)
    return [word for word in text.split()
            if word not in ENGLISH_STOPWORDS and len(word) >= 3]


class ReportAggregator:
    """
    Computes the grouped counts behind every chart and table.
    Ranked reports keep first-encounter order between equal counts.
    """

    def __init__(self, top_n: int = 10, title_min_freq: int = 2, title_max_words: int = 100):
        """
        Initialize the report aggregator.

        Args:
            top_n (int): Number of entries kept by ranked reports
            title_min_freq (int): Minimum frequency for a title term
            title_max_words (int): Maximum number of title terms kept
        """
        self.top_n = top_n
        self.title_min_freq = title_min_freq
        self.title_max_words = title_max_words
        logger.info(f"ReportAggregator initialized with top_n={top_n}")

    def top_countries(self, table: JobTable) -> List[Tuple[str, int]]:
        return Counter(table.column('country')).most_common(self.top_n)

    def experience_distribution(self, table: JobTable) -> Dict[str, int]:
        counts = Counter(table.column('experience_level'))
        return OrderedDict((level, counts.get(level, 0)) for level in EXPERIENCE_LEVELS)

    def daily_postings(self, table: JobTable) -> List[Tuple[date, int]]:
        """Postings per day in date order; rows without a date are skipped."""
        if not table.has_column('posted_date'):
            logger.info("No 'posted_date' column; skipping daily postings")
            return []
        counts = Counter(value for value in table.column('posted_date') if value is not None)
        return sorted(counts.items())

    def top_skills(self, table: JobTable) -> List[Tuple[str, int]]:
        counts = Counter()
        for skills in table.column('skills'):
            if not skills:
                continue
            counts.update(skill for skill in skills.split(SKILL_SEPARATOR) if skill)
        return counts.most_common(self.top_n)

    def title_terms(self, table: JobTable) -> List[Tuple[str, int]]:
        if not table.has_column('job_title'):
            logger.info("No 'job_title' column; skipping title terms")
            return []
        counts = Counter()
        for title in table.column('job_title'):
            counts.update(title_tokens(title))
        frequent = [(term, freq) for term, freq in counts.most_common()
                    if freq >= self.title_min_freq]
        return frequent[:self.title_max_words]

    def build_report(self, table: JobTable) -> Dict[str, Any]:
        """
        Compute every report over the enriched table.

        Returns:
            dict: Report name -> grouped counts
        """
        report = {
            'top_countries': self.top_countries(table),
            'experience_levels': self.experience_distribution(table),
            'daily_postings': self.daily_postings(table),
            'top_skills': self.top_skills(table),
            'title_terms': self.title_terms(table),
            'sentiment_totals': sentiment_totals(table),
        }
        self._log_summary(report)
        return report

    def _log_summary(self, report: Dict[str, Any]) -> None:
        logger.info(f"Top countries: {report['top_countries']}")
        logger.info(f"Experience levels: {dict(report['experience_levels'])}")
        logger.info(f"Posting days: {len(report['daily_postings'])}")
        logger.info(f"Top skills: {report['top_skills']}")
        logger.info(f"Title terms kept: {len(report['title_terms'])}")
        logger.info(f"Sentiment totals: {dict(report['sentiment_totals'])}")
