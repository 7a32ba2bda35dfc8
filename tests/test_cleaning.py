# ========================
# tests/test_cleaning.py
# ========================

import unittest
import sys
import os
from datetime import date

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.job_pipeline.cleaning import DataCleaner, normalize_column_name, title_case
from src.job_pipeline.table import JobTable


def make_table(columns, rows):
    return JobTable(columns, [dict(zip(columns, row)) for row in rows])


class TestDataCleaner(unittest.TestCase):

    def setUp(self):
        self.cleaner = DataCleaner()

    def test_column_names_normalized(self):
        table = make_table(['Job Title', 'Job Description', 'Location', 'Posted Date'],
                           [['x', 'y', 'Remote', '2024-01-01']])

        cleaned = self.cleaner.clean(table)

        self.assertEqual(cleaned.columns, ['job_title', 'job_description', 'location', 'posted_date'])
        self.assertEqual(cleaned.rows[0]['posted_date'], date(2024, 1, 1))

    def test_normalize_column_name(self):
        self.assertEqual(normalize_column_name('Company Name'), 'company_name')
        self.assertEqual(normalize_column_name('location'), 'location')
        self.assertEqual(normalize_column_name('Job  Type'), 'job__type')

    def test_date_parsing_edge_cases(self):
        test_dates = [
            ('2024-01-15', date(2024, 1, 15)),
            ('2024-01-15 10:00:00', date(2024, 1, 15)),
            ('2024-01-15T10:00:00', date(2024, 1, 15)),
            ('2024/01/15', date(2024, 1, 15)),
            ('2024-05-11T10:00:00Z', date(2024, 5, 11)),
            ('2024-05-11T10:00:00.000Z', date(2024, 5, 11)),
            ('2024-05-11 10:00', date(2024, 5, 11)),
            ('2024-02-30T10:00:00Z', None),
            ('15-Jan-2024', None),
            ('invalid-date', None),
            ('', None),
            (None, None)
        ]

        for input_date, expected in test_dates:
            result = self.cleaner._clean_date(input_date)
            self.assertEqual(result, expected, f"Failed for input: {input_date}")

    def test_unparseable_dates_become_none_without_failing(self):
        table = make_table(['location', 'posted_date'],
                           [['Remote', 'not a date'], ['Paris, France', '2024-03-01']])

        cleaned = self.cleaner.clean(table)

        self.assertEqual(cleaned.column('posted_date'), [None, date(2024, 3, 1)])
        self.assertEqual(self.cleaner.get_statistics()['dates_unparsed'], 1)

    def test_timestamps_keep_their_date(self):
        table = make_table(['job_title', 'location', 'posted_date'], [
            ['a', 'Remote', '2024-05-11T10:00:00Z'],
            ['b', 'Remote', '2024-05-11 10:00'],
            ['c', 'Remote', '2024-05-12T10:00:00.000Z'],
        ])

        cleaned = self.cleaner.clean(table)

        self.assertEqual(cleaned.column('posted_date'),
                         [date(2024, 5, 11), date(2024, 5, 11), date(2024, 5, 12)])
        self.assertEqual(self.cleaner.get_statistics()['dates_unparsed'], 0)
        self.assertEqual(len(cleaned), 3)

    def test_missing_posted_date_column_is_tolerated(self):
        table = make_table(['job_description', 'location'], [['text', 'Remote']])

        cleaned = self.cleaner.clean(table)

        self.assertFalse(cleaned.has_column('posted_date'))
        self.assertEqual(len(cleaned), 1)

    def test_job_titles_title_cased(self):
        table = make_table(['job_title', 'location'],
                           [['senior DATA engineer', 'Remote'], [None, 'Remote']])

        cleaned = self.cleaner.clean(table)

        self.assertEqual(cleaned.column('job_title'), ['Senior Data Engineer', None])

    def test_title_case_keeps_apostrophes_inside_words(self):
        self.assertEqual(title_case("analyst's assistant"), "Analyst's Assistant")
        self.assertEqual(title_case("front-end DEVELOPER"), "Front-End Developer")
        self.assertEqual(title_case("3d artist (ii)"), "3d Artist (Ii)")

    def test_titles_differing_only_in_case_are_duplicates(self):
        table = make_table(['job_title', 'location'], [
            ['data analyst', 'Remote'],
            ['Data Analyst', 'Remote'],
            ["analyst's assistant", 'Remote'],
        ])

        cleaned = self.cleaner.clean(table)

        self.assertEqual(cleaned.column('job_title'), ['Data Analyst', "Analyst's Assistant"])
        self.assertEqual(self.cleaner.get_statistics()['duplicates_removed'], 1)

    def test_duplicates_removed_keeping_first_occurrence(self):
        table = make_table(['job_title', 'location'], [
            ['a', 'Remote'],
            ['b', 'London, UK'],
            ['a', 'Remote'],
            ['c', None],
            ['c', None],
        ])

        cleaned = self.cleaner.clean(table)

        self.assertEqual(cleaned.column('job_title'), ['A', 'B', 'C'])
        self.assertEqual(self.cleaner.get_statistics()['duplicates_removed'], 2)

    def test_rows_differing_in_one_column_are_kept(self):
        table = make_table(['job_title', 'location', 'company_name'], [
            ['a', 'Remote', 'Acme'],
            ['a', 'Remote', 'Globex'],
        ])

        self.assertEqual(len(self.cleaner.clean(table)), 2)

    def test_deduplication_is_idempotent(self):
        table = make_table(['job_title', 'location', 'posted_date'], [
            ['a', 'Remote', '2024-01-01'],
            ['a', 'Remote', '2024-01-01'],
            ['b', None, 'bad'],
            ['b', None, 'worse'],
        ])

        once = self.cleaner.clean(table)
        twice = DataCleaner().clean(once)

        self.assertEqual(len(once), 2)
        self.assertEqual(len(twice), len(once))

    def test_missing_locations_filled(self):
        table = make_table(['job_title', 'location'], [['a', None], ['b', ''], ['c', 'Remote']])

        cleaned = self.cleaner.clean(table)

        self.assertEqual(cleaned.column('location'), ['Not Specified', '', 'Remote'])
        self.assertTrue(all(value is not None for value in cleaned.column('location')))
        self.assertEqual(self.cleaner.get_statistics()['locations_filled'], 1)

    def test_null_summary_counts_missing_values(self):
        table = make_table(['job_title', 'location'], [['a', None], [None, None], ['c', 'Remote']])

        self.cleaner.clean(table)

        self.assertEqual(self.cleaner.get_statistics()['null_counts'], {'job_title': 1, 'location': 2})

    def test_input_table_not_modified(self):
        table = make_table(['Job Title', 'location'], [['a', None]])

        self.cleaner.clean(table)

        self.assertEqual(table.columns, ['Job Title', 'location'])
        self.assertIsNone(table.rows[0]['location'])


if __name__ == '__main__':
    unittest.main()
