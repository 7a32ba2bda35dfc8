# ========================
# tests/test_reporting.py
# ========================

import unittest
import tempfile
import os
import sys
from datetime import date
from pathlib import Path
from unittest import mock

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wordcloud import WordCloud

from src.job_pipeline.reporting import ChartRenderer, TableView, save_word_cloud
from src.job_pipeline.table import JobTable


def postings(n):
    columns = ['job_title', 'company_name', 'location', 'experience_level', 'skills', 'job_description']
    rows = []
    for i in range(n):
        rows.append(dict(zip(columns, [
            f'Engineer {i:02d}', None if i == 3 else f'Company {i % 4}', 'Remote',
            'Mid', 'python', 'long text'
        ])))
    return JobTable(columns, rows)


class TestTableView(unittest.TestCase):

    def test_selected_columns_only(self):
        view = TableView(postings(3))
        self.assertEqual(view.columns, ['job_title', 'company_name', 'location', 'experience_level', 'skills'])
        self.assertNotIn('job_description', view.rows[0])

    def test_pagination(self):
        view = TableView(postings(23), page_size=10)

        self.assertEqual(view.page_count, 3)
        self.assertEqual(len(view.page(1)), 10)
        self.assertEqual(len(view.page(3)), 3)
        self.assertEqual(view.page(2)[0]['job_title'], 'Engineer 10')
        with self.assertRaises(IndexError):
            view.page(4)

    def test_empty_table_has_one_empty_page(self):
        view = TableView(JobTable(['job_title'], []))
        self.assertEqual(view.page_count, 1)
        self.assertEqual(view.page(1), [])

    def test_sort_descending_with_missing_last(self):
        view = TableView(postings(5)).sort_by('company_name', descending=True)

        companies = [row['company_name'] for row in view.rows]
        self.assertEqual(companies, ['Company 2', 'Company 1', 'Company 0', 'Company 0', None])

    def test_sort_unknown_column(self):
        with self.assertRaises(KeyError):
            TableView(postings(2)).sort_by('salary')

    def test_to_html_is_sortable_and_paginated_in_the_browser(self):
        view = TableView(postings(12), page_size=5, caption="Jobs <2024>")

        with tempfile.TemporaryDirectory() as temp_dir:
            path = view.to_html(Path(temp_dir) / "table.html")
            content = Path(path).read_text(encoding='utf-8')

        self.assertIn('id="job-postings"', content)
        self.assertIn('data-page-size="5"', content)
        self.assertIn('id="prev-page"', content)
        self.assertIn('id="next-page"', content)
        self.assertIn('addEventListener("click"', content)
        self.assertIn('<title>Jobs &lt;2024&gt;</title>', content)
        for i in range(12):
            self.assertIn(f'Engineer {i:02d}', content)


class TestChartRenderer(unittest.TestCase):

    def test_render_all_writes_png_files(self):
        report = {
            'top_countries': [('USA', 3), ('India', 1)],
            'experience_levels': {'Entry': 1, 'Mid': 0, 'Senior': 3, 'Unspecified': 0},
            'daily_postings': [(date(2024, 1, 1), 2), (date(2024, 1, 2), 2)],
            'top_skills': [('python', 3)],
            'title_terms': [],
            'sentiment_totals': {'joy': 4, 'positive': 6},
        }

        with tempfile.TemporaryDirectory() as temp_dir:
            files = ChartRenderer(temp_dir).render_all(report)

            self.assertEqual(set(files), {
                'top_countries', 'experience_levels', 'sentiment_totals',
                'top_skills', 'title_terms', 'daily_postings'
            })
            for path in files.values():
                self.assertTrue(path.endswith('.png'))
                self.assertGreater(Path(path).stat().st_size, 0)

    def test_title_terms_rendered_as_word_cloud(self):
        terms = [('engineer', 9), ('data', 7), ('senior', 4), ('analyst', 2)]

        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "cloud.png"
            with mock.patch('src.job_pipeline.reporting.WordCloud', wraps=WordCloud) as cloud_cls:
                save_word_cloud(terms, "Job Title Word Cloud", path, max_words=100)

            self.assertGreater(path.stat().st_size, 0)

        cloud_cls.assert_called_once()
        self.assertEqual(cloud_cls.call_args.kwargs['max_words'], 100)

    def test_title_terms_uses_word_cloud_renderer(self):
        report = {
            'top_countries': [],
            'experience_levels': {},
            'daily_postings': [],
            'top_skills': [],
            'title_terms': [('engineer', 3), ('data', 2)],
            'sentiment_totals': {},
        }

        with tempfile.TemporaryDirectory() as temp_dir:
            with mock.patch('src.job_pipeline.reporting.save_word_cloud') as cloud:
                files = ChartRenderer(temp_dir).render_all(report)

        cloud.assert_called_once()
        self.assertEqual(cloud.call_args.args[0], [('engineer', 3), ('data', 2)])
        self.assertTrue(files['title_terms'].endswith('title_terms.png'))


if __name__ == '__main__':
    unittest.main()
