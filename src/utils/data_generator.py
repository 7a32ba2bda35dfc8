# ========================
# src/utils/data_generator.py
# ========================

"""
Data Generation Utilities

Synthetic job postings with realistic text and controlled data-quality issues.
"""

import csv
import random
import logging
from datetime import date, timedelta
from typing import List, Dict, Any, Optional
from pathlib import Path

logger = logging.getLogger(__name__)

HEADER = [
    'job_title', 'job_description', 'company_name', 'location', 'posted_date', 'Job Type'
]


class DataGenerator:
    """
    Data generator for creating job posting test datasets.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize data generator.

        Args:
            seed (int): Random seed for reproducible data generation
        """
        self.rng = random.Random(seed)
        self._initialize_data_patterns()
        logger.info(f"DataGenerator initialized with seed: {seed}")

    def _initialize_data_patterns(self) -> None:
        """Initialize data patterns and distributions."""
        self.titles = [
            "data analyst", "senior data engineer", "Software Engineer",
            "machine learning engineer", "DEVOPS ENGINEER", "business analyst",
            "junior python developer", "cloud architect", "QA engineer",
            "product manager", "site reliability engineer", "data scientist",
        ]

        self.companies = [
            "Acme Analytics", "Globex", "Initech", "Umbrella Labs",
            "Stark Industries", "Wayne Enterprises", "Hooli", "",
        ]

        # Weighted toward a handful of countries
        self.locations = [
            ("New York, NY, USA", 0.18), ("San Francisco, CA, USA", 0.12),
            ("London, United Kingdom", 0.12), ("Bengaluru, Karnataka, India", 0.15),
            ("Berlin, Germany", 0.08), ("Toronto, ON, Canada", 0.08),
            ("Sydney, NSW, Australia", 0.05), ("Remote", 0.10),
            ("Singapore", 0.05), ("Paris, France", 0.07),
        ]

        self.experience_phrases = [
            "0-1 year of experience", "entry level role", "freshers welcome",
            "2-5 years of experience", "mid level position",
            "6+ years of experience", "senior position", "",
        ]

        self.skill_phrases = [
            "python", "java", "SQL", "AWS", "Excel", "machine learning",
            "Docker", "Kubernetes", "Linux", "Git", "Tableau", "Go",
        ]

        self.culture_sentences = [
            "Join a friendly and supportive team with great growth opportunity.",
            "We offer a competitive bonus and flexible work.",
            "Fast paced environment with tight deadline pressure.",
            "We value integrity, trust and respect.",
            "You will mentor others and lead by example.",
            "Help us solve challenging problems for our customer.",
            "",
        ]

        self.job_types = ["Full-time", "Contract", "Part-time", "Internship"]

    def generate_dataset(self,
                         file_path: str,
                         num_rows: int,
                         error_rate: float = 0.15,
                         start_date: Optional[date] = None) -> Dict[str, Any]:
        """
        Generate a postings dataset with controlled error injection.

        Args:
            file_path (str): Output CSV file path
            num_rows (int): Number of rows to generate
            error_rate (float): Fraction of records with intentional errors
            start_date (date): First possible posting date

        Returns:
            dict: Generation statistics
        """
        logger.info(f"Generating {num_rows:,} postings with {error_rate:.1%} error rate...")

        if start_date is None:
            start_date = date(2024, 1, 1)

        stats = {
            'total_rows': num_rows,
            'error_rate': error_rate,
            'start_date': start_date,
            'records_with_errors': 0,
            'error_types': {}
        }

        Path(file_path).parent.mkdir(parents=True, exist_ok=True)

        written: List[List[Any]] = []
        with open(file_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(HEADER)

            for i in range(num_rows):
                if written and self.rng.random() < error_rate / 3:
                    record = list(self.rng.choice(written))
                    stats['records_with_errors'] += 1
                    self._track_error_type(stats, 'duplicate_row')
                else:
                    record = self._generate_single_record(start_date, error_rate, stats)
                written.append(record)
                writer.writerow(record)

                if (i + 1) % 10000 == 0:
                    logger.debug(f"Generated {i + 1:,} postings")

        stats['error_rate_actual'] = stats['records_with_errors'] / num_rows if num_rows else 0.0

        logger.info(f"Dataset generated: {file_path}")
        logger.info(f"Error breakdown: {stats['error_types']}")
        return stats

    def _generate_single_record(self,
                                start_date: date,
                                error_rate: float,
                                stats: Dict[str, Any]) -> List[Any]:
        """Generate a single posting with potential errors."""
        title = self.rng.choice(self.titles)
        company = self.rng.choice(self.companies)

        names = [name for name, _ in self.locations]
        weights = [weight for _, weight in self.locations]
        location = self.rng.choices(names, weights=weights)[0]

        posted = start_date + timedelta(days=self.rng.randint(0, 364))
        posted_date = posted.isoformat()

        skills = self.rng.sample(self.skill_phrases, k=self.rng.randint(0, 4))
        description = " ".join(part for part in [
            f"We are hiring a {title}.",
            f"Requirements: {', '.join(skills)}." if skills else "",
            self.rng.choice(self.experience_phrases).capitalize(),
            self.rng.choice(self.culture_sentences),
        ] if part)

        if self.rng.random() < error_rate:
            stats['records_with_errors'] += 1
            error_type = self.rng.choice(['missing_location', 'malformed_date', 'empty_description'])
            if error_type == 'missing_location':
                location = "NA"
            elif error_type == 'malformed_date':
                posted_date = self.rng.choice(["not a date", "31/31/2024", ""])
            else:
                description = ""
            self._track_error_type(stats, error_type)

        return [title, description, company, location, posted_date, self.rng.choice(self.job_types)]

    def _track_error_type(self, stats: Dict[str, Any], error_type: str) -> None:
        """Track error types for statistics."""
        if error_type not in stats['error_types']:
            stats['error_types'][error_type] = 0
        stats['error_types'][error_type] += 1
