# ========================
# src/job_pipeline/lexicon.py
# ========================

"""
Emotion Lexicon

Word -> category associations from the NRC word-emotion association lexicon,
as bundled with the nrclex package. Loaded once at import and only ever read.
"""

import logging
from typing import Dict, Tuple

from nrclex import NRCLex

logger = logging.getLogger(__name__)

EMOTIONS = (
    "anger", "anticipation", "disgust", "fear",
    "joy", "sadness", "surprise", "trust",
)
POLARITIES = ("negative", "positive")
SENTIMENT_CATEGORIES = EMOTIONS + POLARITIES


def load_nrc_lexicon() -> Dict[str, Tuple[str, ...]]:
    """
    Load the bundled NRC lexicon.

    Returns:
        dict: lower-case word -> categories, in taxonomy order
    """
    raw = NRCLex(lexicon_file=None).__lexicon__
    lexicon = {}
    for word, categories in raw.items():
        known = set(categories)
        lexicon[word] = tuple(c for c in SENTIMENT_CATEGORIES if c in known)

    logger.debug(f"Loaded NRC lexicon with {len(lexicon)} words")
    return lexicon


EMOTION_LEXICON = load_nrc_lexicon()
