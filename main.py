#!/usr/bin/env python3
# ========================
# main.py
# ========================

"""
Main Entry Point for the Job Postings Analysis Pipeline

Loads the postings file, cleans and enriches it, renders the reports and
writes the enriched CSV. Paths come from configuration; there are no flags.
"""

import sys
import logging
from pathlib import Path

from src.job_pipeline import JobAnalysisPipeline
from src.utils import Config, setup_logging


def main():
    """Main execution function."""
    config = Config()

    setup_logging(
        log_level=config.LOG_LEVEL,
        log_file="pipeline.log",
        log_dir=config.LOG_DIR
    )

    logger = logging.getLogger(__name__)
    logger.info("="*60)
    logger.info("JOB POSTINGS ANALYSIS - MAIN EXECUTION")
    logger.info("="*60)

    logger.debug(str(config))

    invalid = [name for name, ok in config.validate_config().items() if not ok]
    if invalid:
        logger.error(f"Invalid configuration settings: {invalid}")
        return 1

    try:
        config.ensure_directories()

        pipeline = JobAnalysisPipeline(config=config)

        if not pipeline.validate_input():
            logger.error("Input validation failed. Exiting.")
            return 1

        results = pipeline.run()
        _print_execution_summary(results)

        logger.info("Analysis complete. Data cleaned, reported and exported.")
        return 0

    except Exception as e:
        logger.error(f"Pipeline execution failed: {e}", exc_info=True)
        return 1


def _print_execution_summary(results: dict) -> None:
    """Print final execution summary."""
    stats = results['cleaning_stats']
    report = results['report']

    print("\n" + "="*70)
    print("JOB POSTINGS ANALYSIS SUMMARY")
    print("="*70)

    print("🧹 Cleaning:")
    print(f"   • Rows read: {stats['rows_in']:,}")
    print(f"   • Duplicates removed: {stats['duplicates_removed']:,}")
    print(f"   • Locations filled: {stats['locations_filled']:,}")
    print(f"   • Unparseable dates: {stats['dates_unparsed']:,}")

    print("\n🌍 Top countries:")
    for country, count in report['top_countries']:
        print(f"   • {country or '(blank)'}: {count:,}")

    print("\n🎓 Experience levels:")
    for level, count in report['experience_levels'].items():
        print(f"   • {level}: {count:,}")

    print("\n🛠  Top skills:")
    for skill, count in report['top_skills']:
        print(f"   • {skill}: {count:,}")

    print("\n📁 Outputs:")
    print(f"   • Enriched data: {results['output_file']}")
    for name, file_path in results['report_files'].items():
        print(f"   • {name.replace('_', ' ').title()}: {Path(file_path).name}")

    print("="*70)


if __name__ == '__main__':
    exit_code = main()
    sys.exit(exit_code)
