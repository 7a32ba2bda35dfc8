# ========================
# tests/test_table.py
# ========================

import unittest
import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.job_pipeline.table import JobTable, MissingColumnError


class TestJobTable(unittest.TestCase):

    def setUp(self):
        self.table = JobTable(['a', 'b'], [{'a': 1, 'b': 2}, {'a': 3}])

    def test_rows_carry_every_column(self):
        self.assertEqual(self.table.rows[1], {'a': 3, 'b': None})
        self.assertEqual(len(self.table), 2)

    def test_add_column_appends_then_replaces(self):
        self.table.add_column('c', ['x', 'y'])
        self.assertEqual(self.table.columns, ['a', 'b', 'c'])

        self.table.add_column('a', [10, 30])
        self.assertEqual(self.table.columns, ['a', 'b', 'c'])
        self.assertEqual(self.table.column('a'), [10, 30])

    def test_add_column_length_mismatch(self):
        with self.assertRaises(ValueError):
            self.table.add_column('c', ['only one'])

    def test_unknown_column(self):
        with self.assertRaises(KeyError):
            self.table.column('missing')

    def test_require_columns_names_all_missing(self):
        with self.assertRaises(MissingColumnError) as ctx:
            self.table.require_columns(['a', 'location', 'job_description'], stage="test")

        self.assertEqual(ctx.exception.missing, ['location', 'job_description'])
        self.assertIsInstance(ctx.exception, ValueError)

    def test_copy_is_independent(self):
        clone = self.table.copy()
        clone.add_column('a', [0, 0])
        self.assertEqual(self.table.column('a'), [1, 3])


if __name__ == '__main__':
    unittest.main()
