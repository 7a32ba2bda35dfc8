# ========================
# src/job_pipeline/table.py
# ========================

"""
In-Memory Table

A minimal column-ordered table of job posting records shared by every stage.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class MissingColumnError(ValueError):
    """Raised when a column required by a pipeline stage is absent."""

    def __init__(self, missing: List[str], stage: str = "pipeline"):
        self.missing = list(missing)
        self.stage = stage
        super().__init__(
            f"{stage}: required column(s) missing from input: {', '.join(self.missing)}"
        )


class JobTable:
    """
    Ordered columns plus a list of row dictionaries.
    Every row carries a value for every column.
    """

    def __init__(self, columns: Optional[Iterable[str]] = None,
                 rows: Optional[List[Dict[str, Any]]] = None):
        self.columns: List[str] = list(columns or [])
        self.rows: List[Dict[str, Any]] = []
        for row in rows or []:
            self.rows.append({col: row.get(col) for col in self.columns})

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def column(self, name: str) -> List[Any]:
        """Return all values of a column in row order."""
        if name not in self.columns:
            raise KeyError(name)
        return [row[name] for row in self.rows]

    def add_column(self, name: str, values: List[Any]) -> None:
        """
        Append a column, or replace it in place if it already exists.

        Args:
            name (str): Column name
            values (list): One value per row, in row order
        """
        if len(values) != len(self.rows):
            raise ValueError(
                f"Column '{name}' has {len(values)} values for {len(self.rows)} rows"
            )
        if name not in self.columns:
            self.columns.append(name)
        for row, value in zip(self.rows, values):
            row[name] = value

    def require_columns(self, names: Iterable[str], stage: str = "pipeline") -> None:
        missing = [name for name in names if name not in self.columns]
        if missing:
            logger.error(f"{stage}: missing required columns {missing}")
            raise MissingColumnError(missing, stage)

    def copy(self) -> 'JobTable':
        return JobTable(self.columns, [dict(row) for row in self.rows])
