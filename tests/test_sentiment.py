# ========================
# tests/test_sentiment.py
# ========================

import unittest
import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.job_pipeline.lexicon import EMOTION_LEXICON, SENTIMENT_CATEGORIES
from src.job_pipeline.sentiment import (
    SENTIMENT_COLUMNS,
    SentimentScorer,
    score_text,
    sentiment_totals,
    tokenize,
)
from src.job_pipeline.table import JobTable


class TestSentimentScoring(unittest.TestCase):

    def test_taxonomy_is_fixed(self):
        self.assertEqual(len(SENTIMENT_CATEGORIES), 10)
        self.assertEqual(SENTIMENT_COLUMNS[0], 'sentiment_anger')
        self.assertEqual(SENTIMENT_COLUMNS[-1], 'sentiment_positive')
        for categories in EMOTION_LEXICON.values():
            for category in categories:
                self.assertIn(category, SENTIMENT_CATEGORIES)

    def test_tokenize(self):
        self.assertEqual(tokenize("Happy, TEAM-player!"), ['happy', 'team', 'player'])
        self.assertEqual(tokenize(None), [])

    def test_counts_every_category_of_each_token(self):
        scores = score_text("Happy team")

        self.assertEqual(list(scores), list(SENTIMENT_CATEGORIES))
        self.assertEqual(scores['positive'], 1)
        self.assertEqual(scores['trust'], 2)
        self.assertEqual(scores['joy'], 1)
        self.assertEqual(scores['anticipation'], 1)
        self.assertEqual(scores['anger'], 0)

    def test_full_nrc_vocabulary(self):
        self.assertGreater(len(EMOTION_LEXICON), 6000)
        self.assertEqual(EMOTION_LEXICON['money'],
                         ('anger', 'anticipation', 'joy', 'surprise', 'trust', 'positive'))

        scores = score_text("We pay well, love our customers and reward money and hard work")

        self.assertEqual(dict(scores), {
            'anger': 1, 'anticipation': 3, 'disgust': 0, 'fear': 0, 'joy': 4,
            'sadness': 0, 'surprise': 2, 'trust': 3, 'negative': 0, 'positive': 4,
        })

    def test_repeated_tokens_counted_each_time(self):
        self.assertEqual(score_text("stress stress")['negative'], 2)

    def test_no_negation_handling(self):
        self.assertEqual(score_text("not happy")['positive'], score_text("happy")['positive'])

    def test_empty_text_scores_zero(self):
        self.assertTrue(all(count == 0 for count in score_text("").values()))
        self.assertTrue(all(count == 0 for count in score_text(None).values()))

    def test_deterministic(self):
        text = "A supportive team with a competitive bonus and tight deadline pressure"
        self.assertEqual(score_text(text), score_text(text))

    def test_score_table_and_totals(self):
        table = JobTable(['job_description'], [
            {'job_description': 'Happy team'},
            {'job_description': 'stress'},
            {'job_description': None},
        ])

        SentimentScorer().score_table(table)

        for column in SENTIMENT_COLUMNS:
            self.assertIn(column, table.columns)
        self.assertEqual(table.column('sentiment_positive'), [1, 0, 0])
        self.assertEqual(table.column('sentiment_negative'), [0, 1, 0])

        totals = sentiment_totals(table)
        self.assertEqual(totals['positive'], 1)
        self.assertEqual(totals['negative'], 1)
        self.assertEqual(totals['trust'], 2)


if __name__ == '__main__':
    unittest.main()
