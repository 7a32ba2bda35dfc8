# ========================
# src/job_pipeline/features.py
# ========================

"""
Feature Extraction Module

Derives country, experience level and skills from free-text columns.
Each derivation is a pure per-row function so rows can be processed in any
order or in parallel.
"""

import re
import logging
from typing import Any, Dict, List, Optional, Sequence

from .table import JobTable

logger = logging.getLogger(__name__)

SKILL_VOCABULARY = (
    "python", "java", "sql", "aws", "excel",
    "machine learning", "docker", "kubernetes", "linux", "git",
)

# Checked in order; the first matching level wins.
EXPERIENCE_PATTERNS = (
    ("Entry", re.compile(r"0-1 year|entry level|fresher", re.IGNORECASE)),
    ("Mid", re.compile(r"2-5 years|mid level", re.IGNORECASE)),
    ("Senior", re.compile(r"6\+ years|senior", re.IGNORECASE)),
)

UNSPECIFIED_LEVEL = "Unspecified"
EXPERIENCE_LEVELS = tuple(level for level, _ in EXPERIENCE_PATTERNS) + (UNSPECIFIED_LEVEL,)

REQUIRED_COLUMNS = ('job_description', 'location')


def extract_country(location: Optional[str]) -> str:
    """Return the trimmed last comma-separated segment of a location."""
    if not location:
        return ""
    if location.endswith(","):
        location = location[:-1]
    return location.split(",")[-1].strip()


def classify_experience(description: Optional[str]) -> str:
    if not description:
        return UNSPECIFIED_LEVEL
    for level, pattern in EXPERIENCE_PATTERNS:
        if pattern.search(description):
            return level
    return UNSPECIFIED_LEVEL


def extract_skills(description: Optional[str],
                   vocabulary: Sequence[str] = SKILL_VOCABULARY) -> str:
    """
    Match vocabulary terms as case-insensitive substrings of the description.

    Returns:
        str: Matched terms in vocabulary order joined by ", ", or ""
    """
    if not description:
        return ""
    text = description.lower()
    return ", ".join(term for term in vocabulary if term in text)


def extract_row_features(row: Dict[str, Any],
                         vocabulary: Sequence[str] = SKILL_VOCABULARY) -> Dict[str, str]:
    description = row.get('job_description')
    return {
        'country': extract_country(row.get('location')),
        'experience_level': classify_experience(description),
        'skills': extract_skills(description, vocabulary),
    }


class FeatureExtractor:
    """
    Appends the derived feature columns to a cleaned table.
    """

    FEATURE_COLUMNS = ('country', 'experience_level', 'skills')

    def __init__(self, vocabulary: Sequence[str] = SKILL_VOCABULARY):
        self.vocabulary = tuple(vocabulary)
        self._features: List[Dict[str, str]] = []
        logger.info(f"FeatureExtractor initialized with {len(self.vocabulary)} skill terms")

    def begin(self, table: JobTable) -> None:
        """Check required columns and reset collected features."""
        table.require_columns(REQUIRED_COLUMNS, stage="feature extraction")
        self._features = []

    def process_chunk(self, chunk: List[Dict[str, Any]]) -> None:
        for row in chunk:
            self._features.append(extract_row_features(row, self.vocabulary))

    def finish(self, table: JobTable) -> None:
        """Attach collected features as columns, in row order."""
        for column in self.FEATURE_COLUMNS:
            table.add_column(column, [features[column] for features in self._features])
        logger.info(f"Derived {', '.join(self.FEATURE_COLUMNS)} for {len(table)} rows")

    def extract(self, table: JobTable) -> JobTable:
        """Derive all feature columns in one pass."""
        self.begin(table)
        self.process_chunk(table.rows)
        self.finish(table)
        return table
