"""
words.py

Handles loading the Duotrigordle dictionary and packing it into a
read-only lexicon that sessions can index into.
"""

from pathlib import Path

import numpy as np


WORD_LENGTH = 5

DATA_DIR = Path(__file__).resolve().parent / "data"
WORDS_PATH = DATA_DIR / "words.txt"


def validate_word(word):
    """Raise ValueError unless word has exactly WORD_LENGTH letters."""
    if len(word) != WORD_LENGTH:
        raise ValueError(
            f"word must have {WORD_LENGTH} letters, got {len(word)}: {word!r}"
        )
    return word


def load_word_list(path):
    """Load a newline-separated word list into a Python list."""
    with open(path, "r") as f:
        return [line.strip().lower() for line in f if line.strip()]


def load_words(path=None):
    """
    Returns:
        words: dictionary entries of exactly WORD_LENGTH letters, in file order
    """
    # Relative to this source tree so the bundled list is found no matter
    # which directory Python is launched from.
    path = WORDS_PATH if path is None else Path(path)
    return [w for w in load_word_list(path) if len(w) == WORD_LENGTH]


def word_codes(words) -> np.ndarray:
    """Code-point matrix of shape (len(words), WORD_LENGTH)."""
    codes = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, word in enumerate(words):
        codes[i] = [ord(c) for c in validate_word(word)]
    return codes


class Lexicon:
    """
    Immutable snapshot of the dictionary shared by every session.

    Sessions keep candidate sets as arrays of indices into this object, so
    the words themselves are stored once per process.
    """

    def __init__(self, words):
        self.words = tuple(words)
        self.chars = word_codes(self.words)
        self.chars.setflags(write=False)
        self._index = {}
        for i, word in enumerate(self.words):
            self._index.setdefault(word, i)

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __contains__(self, word):
        return word in self._index

    def index_of(self, word: str) -> int:
        try:
            return self._index[word]
        except KeyError as exc:
            raise ValueError(f"word not found in dictionary: {word}") from exc

    def words_at(self, indices) -> list[str]:
        return [self.words[i] for i in indices]

    def distinct(self) -> list[str]:
        """Words in dictionary order with duplicates dropped."""
        return list(self._index)
