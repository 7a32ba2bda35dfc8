# ========================
# src/job_pipeline/reporting.py
# ========================

"""
Reporting Module

Renders report figures and the browsable postings table from the grouped
counts produced by ReportAggregator.
"""

from __future__ import annotations

import html
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from wordcloud import WordCloud

from .lexicon import EMOTIONS
from .table import JobTable

logger = logging.getLogger(__name__)

sns.set_theme(style="whitegrid", context="notebook")
plt.rcParams["figure.dpi"] = 120
plt.rcParams["savefig.dpi"] = 160

TABLE_COLUMNS = ("job_title", "company_name", "location", "experience_level", "skills")


def save_bar_chart(
    data: Sequence[Tuple[Any, int]],
    title: str,
    xlabel: str,
    ylabel: str,
    path: Path,
    horizontal: bool = True,
) -> None:
    labels = [str(label) for label, _ in data]
    values = [count for _, count in data]

    fig, ax = plt.subplots(figsize=(11, max(4.5, 0.45 * len(data) + 2)))
    colors = sns.color_palette("viridis", n_colors=max(len(data), 1))

    if horizontal:
        ax.barh(labels, values, color=colors)
        ax.invert_yaxis()
        for y_idx, val in enumerate(values):
            ax.text(val, y_idx, f" {val}", va="center", fontsize=10)
    else:
        ax.bar(labels, values, color=colors)
        ax.tick_params(axis="x", rotation=30)
        for x_idx, val in enumerate(values):
            ax.text(x_idx, val, f"{val}", ha="center", va="bottom", fontsize=10)

    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    sns.despine(ax=ax)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)


def save_word_cloud(frequencies: Sequence[Tuple[str, int]], title: str, path: Path,
                    max_words: int = 100, seed: int = 1234) -> None:
    cloud = WordCloud(
        width=1200,
        height=700,
        background_color="white",
        colormap="Dark2",
        max_words=max_words,
        prefer_horizontal=0.65,
        random_state=seed,
    ).generate_from_frequencies(dict(frequencies))

    fig, ax = plt.subplots(figsize=(11, 6.5))
    ax.imshow(cloud, interpolation="bilinear")
    ax.axis("off")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)


def plot_no_data(path: Path, title: str, message: str) -> None:
    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.axis("off")
    ax.text(0.5, 0.58, title, ha="center", va="center", fontsize=16, fontweight="bold")
    ax.text(0.5, 0.40, message, ha="center", va="center", fontsize=12)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)


class ChartRenderer:
    """Writes one PNG per report into the report directory."""

    def __init__(self, report_dir):
        self.report_dir = Path(report_dir)
        self.report_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"ChartRenderer initialized with report directory: {self.report_dir}")

    def render_all(self, report: Dict[str, Any]) -> Dict[str, str]:
        """
        Render every chart for a report built by ReportAggregator.

        Returns:
            dict: Chart name -> file path
        """
        charts = {
            'top_countries': self._bar(
                report['top_countries'], "Top 10 Countries by Job Postings",
                "Count", "Country", "top_countries.png"),
            'experience_levels': self._bar(
                list(report['experience_levels'].items()), "Job Postings by Experience Level",
                "Experience level", "Count", "experience_levels.png", horizontal=False),
            'sentiment_totals': self._bar(
                [(emotion, report['sentiment_totals'].get(emotion, 0)) for emotion in EMOTIONS],
                "Overall Sentiment in Job Descriptions", "Emotion", "Frequency",
                "sentiment_totals.png", horizontal=False),
            'top_skills': self._bar(
                report['top_skills'], "Top Skills in Demand",
                "Frequency", "Skill", "top_skills.png"),
            'title_terms': self._cloud(report['title_terms'], "title_terms.png"),
            'daily_postings': self._line(report['daily_postings'], "daily_postings.png"),
        }
        logger.info(f"Rendered {len(charts)} charts to {self.report_dir}")
        return charts

    def _bar(self, data, title, xlabel, ylabel, filename, horizontal=True) -> str:
        path = self.report_dir / filename
        if not data:
            plot_no_data(path, title, "No data available")
        else:
            save_bar_chart(data, title, xlabel, ylabel, path, horizontal=horizontal)
        return str(path)

    def _cloud(self, terms: List[Tuple[str, int]], filename: str) -> str:
        path = self.report_dir / filename
        title = "Job Title Word Cloud"
        if not terms:
            plot_no_data(path, title, "No title terms reach the minimum frequency")
        else:
            save_word_cloud(terms, title, path, max_words=len(terms))
        return str(path)

    def _line(self, series: List[Tuple[Any, int]], filename: str) -> str:
        path = self.report_dir / filename
        title = "Job Postings Over Time"
        if not series:
            plot_no_data(path, title, "No posting dates available")
            return str(path)

        dates = [day for day, _ in series]
        counts = [count for _, count in series]
        fig, ax = plt.subplots(figsize=(11, 5))
        ax.plot(dates, counts, color="#E74C3C")
        ax.set_title(title)
        ax.set_xlabel("Date")
        ax.set_ylabel("Count")
        fig.autofmt_xdate()
        sns.despine(ax=ax)
        fig.tight_layout()
        fig.savefig(path, bbox_inches="tight")
        plt.close(fig)
        return str(path)


class TableView:
    """
    Sortable, paginated view over selected columns of the enriched table.
    """

    def __init__(self, table: JobTable, columns: Sequence[str] = TABLE_COLUMNS,
                 page_size: int = 10, caption: str = "Job Postings Table"):
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self.columns = [col for col in columns if table.has_column(col)]
        self.page_size = page_size
        self.caption = caption
        self.rows = [{col: row[col] for col in self.columns} for row in table.rows]

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(len(self.rows) / self.page_size))

    def sort_by(self, column: str, descending: bool = False) -> 'TableView':
        """Stable sort on one column; missing values always go last."""
        if column not in self.columns:
            raise KeyError(column)
        present = [row for row in self.rows if row[column] is not None]
        missing = [row for row in self.rows if row[column] is None]
        present.sort(key=lambda row: row[column], reverse=descending)
        self.rows = present + missing
        return self

    def page(self, number: int) -> List[Dict[str, Any]]:
        """Rows of a 1-based page number."""
        if not 1 <= number <= self.page_count:
            raise IndexError(f"Page {number} out of range 1..{self.page_count}")
        start = (number - 1) * self.page_size
        return self.rows[start:start + self.page_size]

    def to_frame(self, number: Optional[int] = None) -> pd.DataFrame:
        rows = self.rows if number is None else self.page(number)
        return pd.DataFrame(rows, columns=self.columns)

    def to_html(self, path) -> str:
        """
        Write the view as a single HTML page.
        Clicking a column header sorts on it (again to reverse) and the
        Previous/Next buttons move between pages of page_size rows.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        caption = html.escape(self.caption)
        table_html = self.to_frame().to_html(index=False, na_rep="", escape=True,
                                             table_id="job-postings")
        page = "\n".join([
            "<!DOCTYPE html>",
            '<html><head><meta charset="utf-8">',
            f"<title>{caption}</title>",
            f"<style>{_TABLE_STYLE}</style>",
            "</head><body>",
            f"<h1>{caption}</h1>",
            f'<div id="job-postings-view" data-page-size="{self.page_size}">',
            table_html,
            "</div>",
            '<div class="pager"><button id="prev-page">Previous</button> '
            '<span id="page-label"></span> <button id="next-page">Next</button></div>',
            f"<script>{_TABLE_SCRIPT}</script>",
            "</body></html>",
            "",
        ])
        path.write_text(page, encoding="utf-8")
        logger.info(f"Table view with {len(self.rows)} rows written to {path}")
        return str(path)


_TABLE_STYLE = """
body { font-family: sans-serif; margin: 2em; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #ccc; padding: 4px 8px; text-align: left; }
th { background: #f2f2f2; cursor: pointer; }
.pager { margin-top: 1em; }
"""

_TABLE_SCRIPT = """
(function () {
  var view = document.getElementById("job-postings-view");
  var table = document.getElementById("job-postings");
  var body = table.tBodies[0];
  var label = document.getElementById("page-label");
  var pageSize = parseInt(view.getAttribute("data-page-size"), 10);
  var current = 1;
  var sortColumn = -1;
  var descending = false;

  function rows() { return Array.prototype.slice.call(body.rows); }
  function pageCount() { return Math.max(1, Math.ceil(body.rows.length / pageSize)); }

  function show(page) {
    current = Math.min(Math.max(page, 1), pageCount());
    rows().forEach(function (row, i) {
      row.style.display = Math.floor(i / pageSize) + 1 === current ? "" : "none";
    });
    label.textContent = "Page " + current + " of " + pageCount();
  }

  function sortBy(column) {
    descending = column === sortColumn ? !descending : false;
    sortColumn = column;
    var sorted = rows().sort(function (a, b) {
      var x = a.cells[column].textContent;
      var y = b.cells[column].textContent;
      if (x === "" || y === "") { return (x === "") - (y === ""); }
      var order = x.localeCompare(y, undefined, {numeric: true});
      return descending ? -order : order;
    });
    sorted.forEach(function (row) { body.appendChild(row); });
    show(1);
  }

  Array.prototype.forEach.call(table.tHead.rows[0].cells, function (cell, i) {
    cell.addEventListener("click", function () { sortBy(i); });
  });
  document.getElementById("prev-page").addEventListener("click", function () { show(current - 1); });
  document.getElementById("next-page").addEventListener("click", function () { show(current + 1); });
  show(1);
})();
"""
