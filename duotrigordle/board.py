"""
board.py

One Duotrigordle board: a secret word and the feedback recorded for every
guess played against it.
"""

import numpy as np

from .patterns import Feedback, compute_feedback, consistent_mask, filter_words
from .words import validate_word


class Board:
    def __init__(self, secret: str):
        self.secret = validate_word(secret)
        self._history: list[Feedback] = []

    def __repr__(self):
        return f"Board({self.secret!r}, guesses={len(self._history)})"

    @property
    def history(self) -> tuple:
        return tuple(self._history)

    @property
    def solved(self) -> bool:
        """True once the secret itself has been guessed; never reverts."""
        return any(f.guess == self.secret for f in self._history)

    def guess(self, word: str) -> Feedback:
        feedback = compute_feedback(self.secret, word)
        self._history.append(feedback)
        return feedback

    def filter_candidates(self, words) -> list[str]:
        """Narrow words by every recorded feedback, in guess order."""
        return filter_words(self._history, words)

    def filter_last(self, words) -> list[str]:
        """Narrow words by the latest feedback only."""
        if not self._history:
            return list(words)
        return filter_words(self._history[-1:], words)

    def narrow_last(self, lexicon, indices: np.ndarray) -> np.ndarray:
        """Lexicon indices that survive the latest feedback."""
        if not self._history:
            return indices
        feedback = self._history[-1]
        return indices[consistent_mask(feedback, lexicon.chars[indices])]

    def clear(self):
        self._history.clear()
