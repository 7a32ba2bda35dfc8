# ========================
# src/job_pipeline/storage.py
# ========================

"""
Data Storage Module

Writes the enriched job postings table to CSV.
"""

import csv
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict

from .sentiment import SENTIMENT_COLUMNS
from .table import JobTable

logger = logging.getLogger(__name__)

NA_MARKER = "NA"


def _parse_iso_date(value: str) -> date:
    return datetime.strptime(value, "%Y-%m-%d").date()


# Reader converters that restore exported column types.
ENRICHED_CONVERTERS: Dict[str, Callable[[str], Any]] = {
    'posted_date': _parse_iso_date,
    **{column: int for column in SENTIMENT_COLUMNS},
}


class DataExporter:
    """
    Serializes a JobTable with a header row and no index column.
    Missing values are written as the NA marker.
    """

    def __init__(self, na_rep: str = NA_MARKER):
        self.na_rep = na_rep

    def export(self, table: JobTable, file_path) -> str:
        """
        Write the table to a CSV file.

        Args:
            table (JobTable): Enriched table
            file_path (str): Destination path

        Returns:
            str: Path written
        """
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow(table.columns)
                for row in table.rows:
                    writer.writerow([self._format_value(row[col]) for col in table.columns])

            logger.info(f"Saved {len(table)} records with {len(table.columns)} columns to {path}")
            return str(path)

        except Exception as e:
            logger.error(f"Error writing CSV file {path}: {e}")
            raise

    def _format_value(self, value: Any) -> Any:
        if value is None:
            return self.na_rep
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return value
