# ========================
# src/job_pipeline/ingestion.py
# ========================

"""
Data Ingestion Module

Reads job posting CSV files into memory, either in chunks or as a whole table.
"""

import csv
import logging
from typing import Any, Callable, Dict, Iterable, Optional

from .table import JobTable

logger = logging.getLogger(__name__)

DEFAULT_NA_VALUES = ("NA",)


class CSVReader:
    """
    Reads a delimited job postings file.
    Cells equal to one of the NA markers become None; everything else is
    kept as text unless a converter is registered for its column.
    """

    def __init__(self, file_path,
                 na_values: Iterable[str] = DEFAULT_NA_VALUES,
                 converters: Optional[Dict[str, Callable[[str], Any]]] = None):
        """
        Initialize the CSV reader.

        Args:
            file_path (str): Path to the CSV file to read
            na_values (iterable): Cell values treated as missing
            converters (dict): Optional column -> callable applied to non-null cells
        """
        self.file_path = file_path
        self.na_values = set(na_values)
        self.converters = converters or {}
        self.header = []
        logger.info(f"Initialized CSVReader for file: {file_path}")

    def read_in_chunks(self, chunk_size):
        """
        A generator that yields a list of dictionaries for each chunk of data.

        Args:
            chunk_size (int): The number of rows to yield per chunk.

        Yields:
            list[dict]: A list of dictionaries representing a chunk of rows.
        """
        try:
            with open(self.file_path, 'r', newline='', encoding='utf-8-sig') as f:
                reader = csv.DictReader(f)
                self.header = list(reader.fieldnames or [])
                logger.info(f"CSV header: {self.header}")

                chunk = []
                row_count = 0

                for row in reader:
                    chunk.append(self._convert_row(row))
                    row_count += 1

                    if len(chunk) == chunk_size:
                        logger.debug(f"Yielding chunk with {len(chunk)} rows")
                        yield chunk
                        chunk = []

                if chunk:
                    logger.debug(f"Yielding final chunk with {len(chunk)} rows")
                    yield chunk

                logger.info(f"Total rows read: {row_count}")

        except FileNotFoundError:
            logger.error(f"File '{self.file_path}' was not found")
            raise
        except Exception as e:
            logger.error(f"Error reading CSV file: {e}")
            raise

    def read_table(self, chunk_size: int = 10000) -> JobTable:
        """Read the whole file into a JobTable."""
        rows = []
        for chunk in self.read_in_chunks(chunk_size):
            rows.extend(chunk)
        table = JobTable(self.header, rows)
        logger.info(f"Loaded {len(table)} rows x {len(table.columns)} columns")
        return table

    def _convert_row(self, row: Dict[str, Any]) -> Dict[str, Any]:
        converted = {}
        for column in self.header:
            value = row.get(column)
            if value is None or value in self.na_values:
                converted[column] = None
            elif column in self.converters:
                converted[column] = self.converters[column](value)
            else:
                converted[column] = value
        return converted
