# ========================
# src/job_pipeline/cleaning.py
# ========================

"""
Data Cleaning Module

Normalizes column names, parses posting dates, removes duplicate rows and
fills missing locations.
"""

import logging
import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .table import JobTable

logger = logging.getLogger(__name__)

LOCATION_PLACEHOLDER = "Not Specified"

# Leading year-month-day; anything after it (time, zone) is ignored.
_LEADING_DATE = re.compile(r"\s*(\d{4}-\d{1,2}-\d{1,2})")
# A word keeps inner apostrophes, so "analyst's" stays one word.
_TITLE_WORD = re.compile(r"[^\W_]+(?:['\u2019][^\W_]+)*")


def normalize_column_name(name: str) -> str:
    """Lower-case a column name and replace spaces with underscores."""
    return name.replace(" ", "_").lower()


def title_case(value: str) -> str:
    """Capitalize the first letter of each word and lower-case the rest."""
    return _TITLE_WORD.sub(lambda match: match.group(0).capitalize(), value)


class DataCleaner:
    """
    Applies the cleaning rules to a whole table.
    The input table is left untouched; a cleaned copy is returned.
    """

    DATE_FORMATS = [
        "%Y-%m-%d",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%dT%H:%M:%S",
        "%Y/%m/%d",
    ]

    def __init__(self, location_placeholder: str = LOCATION_PLACEHOLDER):
        """Initialize the data cleaner."""
        self.location_placeholder = location_placeholder
        self.rows_in = 0
        self.duplicates_removed = 0
        self.dates_unparsed = 0
        self.locations_filled = 0
        self.null_counts: Dict[str, int] = {}
        logger.info("DataCleaner initialized")

    def clean(self, table: JobTable) -> JobTable:
        """
        Run every cleaning step in order.

        Args:
            table (JobTable): Raw table from the loader

        Returns:
            JobTable: Cleaned table
        """
        self.rows_in = len(table)
        self.duplicates_removed = 0
        self.dates_unparsed = 0
        self.locations_filled = 0

        cleaned = self.normalize_columns(table)
        self._parse_posted_dates(cleaned)
        # Titles are cased before deduplication so the output has no duplicate rows.
        self._title_case_job_titles(cleaned)
        cleaned = self.drop_duplicates(cleaned)
        self.null_counts = self.null_summary(cleaned)
        self._fill_locations(cleaned)

        logger.info(
            f"Cleaning complete: {self.rows_in} rows in, {len(cleaned)} rows out, "
            f"{self.duplicates_removed} duplicates removed"
        )
        return cleaned

    def normalize_columns(self, table: JobTable) -> JobTable:
        """Return a copy of the table with normalized column names."""
        renamed = [normalize_column_name(col) for col in table.columns]
        if len(set(renamed)) != len(renamed):
            logger.warning(f"Column names collide after normalization: {renamed}")

        rows = []
        for row in table.rows:
            rows.append({new: row[old] for old, new in zip(table.columns, renamed)})
        return JobTable(renamed, rows)

    def drop_duplicates(self, table: JobTable) -> JobTable:
        """
        Remove rows equal to an earlier row on every column.
        The first occurrence is kept and row order is preserved.
        """
        seen = set()
        rows = []
        for row in table.rows:
            key = tuple(row[col] for col in table.columns)
            if key in seen:
                continue
            seen.add(key)
            rows.append(row)

        removed = len(table) - len(rows)
        self.duplicates_removed += removed
        if removed:
            logger.info(f"Removed {removed} duplicate rows")
        return JobTable(table.columns, rows)

    def null_summary(self, table: JobTable) -> Dict[str, int]:
        """Count missing values per column."""
        summary = {col: sum(1 for value in table.column(col) if value is None)
                   for col in table.columns}
        logger.info(f"Null values per column: {summary}")
        return summary

    def _parse_posted_dates(self, table: JobTable) -> None:
        if not table.has_column('posted_date'):
            logger.info("No 'posted_date' column; skipping date parsing")
            return

        parsed: List[Optional[date]] = []
        for value in table.column('posted_date'):
            result = self._clean_date(value)
            if result is None and value not in (None, ""):
                self.dates_unparsed += 1
                logger.debug(f"Unparseable posted_date: {value!r}")
            parsed.append(result)
        table.add_column('posted_date', parsed)

        if self.dates_unparsed:
            logger.warning(f"{self.dates_unparsed} posted_date values could not be parsed")

    def _clean_date(self, value: Any) -> Optional[date]:
        """
        Parses an ISO-like date string.
        Timestamps such as '2024-05-11T10:00:00Z' keep their date part.
        Returns a date object or None if malformed.
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not value or not isinstance(value, str):
            return None

        for fmt in self.DATE_FORMATS:
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue

        match = _LEADING_DATE.match(value)
        if match:
            try:
                return datetime.strptime(match.group(1), "%Y-%m-%d").date()
            except ValueError:
                return None
        return None

    def _title_case_job_titles(self, table: JobTable) -> None:
        if not table.has_column('job_title'):
            logger.warning("No 'job_title' column; skipping title normalization")
            return
        titles = [title_case(value) if isinstance(value, str) else value
                  for value in table.column('job_title')]
        table.add_column('job_title', titles)

    def _fill_locations(self, table: JobTable) -> None:
        if not table.has_column('location'):
            logger.warning("No 'location' column to fill")
            return

        filled = []
        for value in table.column('location'):
            if value is None:
                self.locations_filled += 1
                filled.append(self.location_placeholder)
            else:
                filled.append(value)
        table.add_column('location', filled)

        if self.locations_filled:
            logger.info(f"Filled {self.locations_filled} missing locations with '{self.location_placeholder}'")

    def get_statistics(self) -> Dict[str, Any]:
        """Get cleaning statistics."""
        return {
            'rows_in': self.rows_in,
            'rows_out': self.rows_in - self.duplicates_removed,
            'duplicates_removed': self.duplicates_removed,
            'dates_unparsed': self.dates_unparsed,
            'locations_filled': self.locations_filled,
            'null_counts': dict(self.null_counts),
        }
