"""
Duotrigordle odds
=================

Estimates, for each dictionary word, how often a greedy always-play-the-
determined-word strategy solves all 32 boards when that word is a secret.
"""

__version__ = "0.1.0"

from .board import Board
from .patterns import Color, Feedback, compute_feedback, filter_words, is_consistent
from .session import BOARD_COUNT, Duotrigordle
from .stats import confidence_interval
from .words import WORD_LENGTH, Lexicon, load_words
