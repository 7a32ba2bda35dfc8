#!/usr/bin/env python3
# ========================
# scripts/generate_sample_data.py
# ========================

"""
Writes a synthetic job postings file to the configured input path so the
pipeline can be run end to end without real data.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.utils.config import Config
from src.utils.data_generator import DataGenerator
from src.utils.logging_setup import setup_logging


def main():
    """Generate sample postings."""
    config = Config()
    setup_logging(log_level=config.LOG_LEVEL)

    if len(sys.argv) > 1:
        try:
            num_rows = int(sys.argv[1])
        except ValueError:
            print("Usage: python scripts/generate_sample_data.py [num_rows]")
            print("Example: python scripts/generate_sample_data.py 2000")
            sys.exit(1)
    else:
        num_rows = config.DEFAULT_SAMPLE_ROWS

    input_file = config.INPUT_FILE
    if os.path.exists(input_file):
        response = input(f"File {input_file} already exists. Overwrite? (y/N): ")
        if response.lower() != 'y':
            print("Keeping existing data file.")
            return

    stats = DataGenerator(seed=42).generate_dataset(input_file, num_rows, error_rate=0.15)

    print(f"✅ {stats['total_rows']:,} postings written to {input_file}")
    print(f"   Injected issues: {stats['error_types']}")
    print("   Run the analysis with: python main.py")


if __name__ == '__main__':
    main()
