# ========================
# src/job_pipeline/orchestrator.py
# ========================

"""
Pipeline Orchestrator Module

Main orchestrator class that runs the job postings analysis end to end.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .ingestion import CSVReader
from .cleaning import DataCleaner
from .features import FeatureExtractor
from .sentiment import SentimentScorer
from .transformation import ReportAggregator
from .storage import DataExporter
from .table import JobTable
from ..utils.performance_monitor import monitor_performance
from ..utils.config import Config

logger = logging.getLogger(__name__)


class JobAnalysisPipeline:
    """
    Orchestrates the job postings pipeline.
    Loads, cleans, enriches, reports on and exports a single table.
    """

    def __init__(self,
                 input_file: Optional[str] = None,
                 output_file: Optional[str] = None,
                 report_dir: Optional[str] = None,
                 chunk_size: Optional[int] = None,
                 config: Optional[Config] = None):
        """
        Initialize the pipeline.

        Args:
            input_file (str): Path to the raw postings CSV
            output_file (str): Path of the enriched CSV
            report_dir (str): Directory for charts and the table view
            chunk_size (int): Rows per chunk for per-row derivations
            config (Config): Configuration object
        """
        self.config = config or Config()
        self.input_file = input_file or self.config.INPUT_FILE
        self.output_file = output_file or self.config.OUTPUT_FILE
        self.report_dir = report_dir or self.config.REPORT_DIR
        self.chunk_size = chunk_size or self.config.CHUNK_SIZE

        self.reader = CSVReader(self.input_file)
        self.cleaner = DataCleaner()
        self.extractor = FeatureExtractor()
        self.scorer = SentimentScorer()
        self.aggregator = ReportAggregator(
            top_n=self.config.TOP_N_LIMIT,
            title_min_freq=self.config.TITLE_TERMS_MIN_FREQ,
            title_max_words=self.config.TITLE_TERMS_MAX_WORDS,
        )
        self.exporter = DataExporter()

        logger.info("JobAnalysisPipeline initialized:")
        logger.info(f"  Input: {self.input_file}")
        logger.info(f"  Output: {self.output_file}")
        logger.info(f"  Reports: {self.report_dir if self.config.ENABLE_REPORTS else 'disabled'}")

    def run(self) -> Dict[str, Any]:
        """
        Execute the complete pipeline from start to finish.

        Returns:
            dict: Summary of processing results and written files
        """
        logger.info(f"Starting job postings analysis for '{self.input_file}'...")

        with monitor_performance("Job Postings Analysis") as monitor:
            raw = self.reader.read_table(self.chunk_size)
            monitor.add_checkpoint('loaded', {'rows': len(raw)})

            table = self.cleaner.clean(raw)
            monitor.add_checkpoint('cleaned', {'rows': len(table)})

            self._derive_columns(table, monitor)

            report = self.aggregator.build_report(table)
            monitor.add_checkpoint('reported')

            report_files = self._render_reports(table, report)

            output_path = self.exporter.export(table, self.output_file)
            monitor.add_checkpoint('exported')
            performance = monitor.get_current_stats()

        results = {
            'pipeline_status': 'completed',
            'input_file': self.input_file,
            'output_file': output_path,
            'rows_exported': len(table),
            'columns_exported': list(table.columns),
            'cleaning_stats': self.cleaner.get_statistics(),
            'report': report,
            'report_files': report_files,
            'performance': performance,
        }

        logger.info("Pipeline finished successfully.")
        self._log_final_summary(results)
        return results

    def _derive_columns(self, table: JobTable, monitor) -> None:
        """Apply per-row feature extraction and sentiment scoring chunk by chunk."""
        self.extractor.begin(table)
        self.scorer.begin(table)

        chunk_num = 0
        for start in range(0, len(table), self.chunk_size):
            chunk = table.rows[start:start + self.chunk_size]
            chunk_num += 1
            logger.debug(f"Deriving features for chunk {chunk_num} with {len(chunk)} rows")
            self.extractor.process_chunk(chunk)
            self.scorer.process_chunk(chunk)
            monitor.update_progress(len(chunk))

        self.extractor.finish(table)
        self.scorer.finish(table)
        monitor.add_checkpoint('enriched', {'chunks': chunk_num})

    def _render_reports(self, table: JobTable, report: Dict[str, Any]) -> Dict[str, str]:
        if not self.config.ENABLE_REPORTS:
            logger.info("Report rendering disabled")
            return {}

        from .reporting import ChartRenderer, TableView

        files = ChartRenderer(self.report_dir).render_all(report)
        view = TableView(table, page_size=self.config.TABLE_PAGE_SIZE,
                         caption="Job Postings Table")
        files['table_view'] = view.to_html(Path(self.report_dir) / "job_postings_table.html")
        return files

    def _log_final_summary(self, results: dict) -> None:
        logger.info("="*60)
        logger.info("PIPELINE EXECUTION SUMMARY")
        logger.info("="*60)

        stats = results['cleaning_stats']
        logger.info(f"Input file: {results['input_file']}")
        logger.info(f"Rows read: {stats['rows_in']:,}")
        logger.info(f"Duplicates removed: {stats['duplicates_removed']:,}")
        logger.info(f"Rows exported: {results['rows_exported']:,}")
        logger.info(f"Output file: {results['output_file']}")

        for name, file_path in results['report_files'].items():
            logger.info(f"  • {name}: {file_path}")

        logger.info("="*60)

    def validate_input(self) -> bool:
        """
        Validate input file exists and is readable.

        Returns:
            bool: True if input is valid
        """
        input_path = Path(self.input_file)
        if not input_path.exists():
            logger.error(f"Input file does not exist: {self.input_file}")
            return False

        if not input_path.is_file():
            logger.error(f"Input path is not a file: {self.input_file}")
            return False

        try:
            with open(self.input_file, 'r', encoding='utf-8-sig') as f:
                f.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read input file: {e}")
            return False

        logger.info(f"Input validation passed: {self.input_file}")
        return True
