# ========================
# src/utils/config.py
# ========================

"""
Configuration Management

Centralized configuration for the job postings pipeline with environment support.
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional


class Config:
    """
    Configuration class for the job postings pipeline.
    Supports environment variables and default values.
    """

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration.

        Args:
            config_dict (dict): Optional configuration overrides
        """
        # File Paths
        self.INPUT_FILE = os.getenv('PIPELINE_INPUT_FILE', 'linkedin_jobs_2024_25.csv')
        self.OUTPUT_FILE = os.getenv('PIPELINE_OUTPUT_FILE', 'linkedin_cleaned_2024_25.csv')
        self.REPORT_DIR = os.getenv('PIPELINE_REPORT_DIR', 'reports')
        self.LOG_DIR = os.getenv('PIPELINE_LOG_DIR', 'logs')

        # Data Processing Configuration
        self.CHUNK_SIZE = int(os.getenv('PIPELINE_CHUNK_SIZE', '1000'))

        # Data Generation Settings
        self.DEFAULT_SAMPLE_ROWS = int(os.getenv('SAMPLE_ROWS', '500'))

        # Reporting Settings
        self.TOP_N_LIMIT = int(os.getenv('TOP_N_LIMIT', '10'))
        self.TITLE_TERMS_MIN_FREQ = int(os.getenv('TITLE_TERMS_MIN_FREQ', '2'))
        self.TITLE_TERMS_MAX_WORDS = int(os.getenv('TITLE_TERMS_MAX_WORDS', '100'))
        self.TABLE_PAGE_SIZE = int(os.getenv('TABLE_PAGE_SIZE', '10'))
        self.ENABLE_REPORTS = os.getenv('ENABLE_REPORTS', 'true').lower() == 'true'

        # Logging Configuration
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

        # Override with provided config
        if config_dict:
            self._update_from_dict(config_dict)

    def _update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for key, value in config_dict.items():
            if hasattr(self, key.upper()):
                setattr(self, key.upper(), value)

    def get_data_paths(self) -> Dict[str, Path]:
        """Get all configured data paths as Path objects."""
        return {
            'input_file': Path(self.INPUT_FILE),
            'output_file': Path(self.OUTPUT_FILE),
            'report_dir': Path(self.REPORT_DIR),
            'logs_dir': Path(self.LOG_DIR)
        }

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        paths = self.get_data_paths()
        for path_name, path in paths.items():
            if path_name.endswith('_dir'):
                path.mkdir(parents=True, exist_ok=True)
        paths['output_file'].parent.mkdir(parents=True, exist_ok=True)

    def validate_config(self) -> Dict[str, bool]:
        """
        Validate configuration values.

        Returns:
            dict: Validation results for each setting
        """
        validations = {}

        validations['chunk_size'] = self.CHUNK_SIZE > 0
        validations['sample_rows'] = self.DEFAULT_SAMPLE_ROWS > 0
        validations['top_n_limit'] = self.TOP_N_LIMIT > 0
        validations['title_terms_min_freq'] = self.TITLE_TERMS_MIN_FREQ > 0
        validations['title_terms_max_words'] = self.TITLE_TERMS_MAX_WORDS > 0
        validations['table_page_size'] = self.TABLE_PAGE_SIZE > 0
        validations['distinct_paths'] = Path(self.INPUT_FILE).resolve() != Path(self.OUTPUT_FILE).resolve()

        valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        validations['log_level'] = self.LOG_LEVEL.upper() in valid_log_levels

        return validations

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            attr: getattr(self, attr)
            for attr in dir(self)
            if not attr.startswith('_') and not callable(getattr(self, attr))
        }

    def __str__(self) -> str:
        """String representation of configuration."""
        lines = ["Configuration Settings:"]
        config_dict = self.to_dict()
        for key, value in sorted(config_dict.items()):
            lines.append(f"  {key}: {value}")
        return "\n".join(lines)
