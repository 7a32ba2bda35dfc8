# ========================
# src/job_pipeline/__init__.py
# ========================

"""
Job Postings Analysis Package

Core stages of the job postings pipeline:
- ingestion: CSV loading into an in-memory table
- cleaning: column normalization, date parsing, deduplication
- features: country, experience level and skill derivation
- sentiment: lexicon-based emotion and polarity counts
- transformation: grouped counts for reporting
- reporting: charts and the paginated table view
- storage: enriched CSV export
- orchestrator: pipeline coordination
"""

from .table import JobTable, MissingColumnError
from .ingestion import CSVReader
from .cleaning import DataCleaner
from .features import FeatureExtractor
from .sentiment import SentimentScorer
from .transformation import ReportAggregator
from .storage import DataExporter
from .orchestrator import JobAnalysisPipeline

__all__ = [
    'JobTable',
    'MissingColumnError',
    'CSVReader',
    'DataCleaner',
    'FeatureExtractor',
    'SentimentScorer',
    'ReportAggregator',
    'DataExporter',
    'JobAnalysisPipeline'
]

__version__ = "1.0.0"
