"""
patterns.py

Wordle feedback for a single (secret, guess) pair, and the consistency
check that decides whether a candidate could still be the secret.

Colors are encoded as

    0 = gray
    1 = yellow
    2 = green

so a 5-tile pattern also has a compact base-3 integer code (0..242).
"""

import enum
from dataclasses import dataclass

import numpy as np

from .words import WORD_LENGTH, validate_word


class Color(enum.IntEnum):
    GRAY = 0
    YELLOW = 1
    GREEN = 2


@dataclass(frozen=True)
class Feedback:
    """A guessed word and the color of each of its tiles."""

    guess: str
    colors: tuple[Color, ...]

    def __post_init__(self):
        validate_word(self.guess)
        if len(self.colors) != WORD_LENGTH:
            raise ValueError(
                f"feedback must have {WORD_LENGTH} colors, got {len(self.colors)}"
            )
        object.__setattr__(self, "colors", tuple(Color(c) for c in self.colors))

    @property
    def code(self) -> int:
        code = 0
        for c in self.colors:
            code = code * 3 + int(c)
        return code

    @property
    def solved(self) -> bool:
        return all(c is Color.GREEN for c in self.colors)

    def gray_count(self, letter: str) -> int:
        """Number of gray tiles showing letter."""
        return sum(
            1
            for g, c in zip(self.guess, self.colors)
            if c is Color.GRAY and g == letter
        )


def indices(word: str, letter: str) -> list[int]:
    """Positions of letter within word, left to right."""
    return [i for i, c in enumerate(word) if c == letter]


def compute_feedback(secret: str, guess: str) -> Feedback:
    """
    Color a guess against a secret using standard duplicate-letter rules.

    1. First mark greens (exact position matches).

    2. Then every secret letter not consumed by a green claims the leftmost
       guess tile with the same letter that is still gray, turning it
       yellow. A secret letter claims at most one tile, so surplus copies
       of a letter in the guess stay gray.
    """
    validate_word(secret)
    validate_word(guess)

    colors = [Color.GRAY] * WORD_LENGTH

    # First pass: greens
    for i in range(WORD_LENGTH):
        if guess[i] == secret[i]:
            colors[i] = Color.GREEN

    # Second pass: yellows, one per unconsumed secret letter
    for i in range(WORD_LENGTH):
        if colors[i] is Color.GREEN:
            continue
        for loc in indices(guess, secret[i]):
            if colors[loc] is Color.GRAY:
                colors[loc] = Color.YELLOW
                break

    return Feedback(guess, tuple(colors))


def is_consistent(feedback: Feedback, candidate: str) -> bool:
    """
    Could candidate be the secret that produced feedback?

    Per tile with letter g:
        green:  candidate has g at the same position
        yellow: candidate has g, but not at this position, and has at least
                as many g as the guess shows non-gray tiles for g
        gray:   the gray g tiles are exactly the guess's surplus of g over
                the candidate
    """
    validate_word(candidate)
    guess = feedback.guess

    for i, color in enumerate(feedback.colors):
        g = guess[i]

        if color is Color.GREEN:
            if candidate[i] != g:
                return False
            continue

        in_guess = guess.count(g)
        in_candidate = candidate.count(g)
        grays = feedback.gray_count(g)

        if color is Color.YELLOW:
            if candidate[i] == g:
                return False
            if in_candidate == 0:
                return False
            if in_guess - grays > in_candidate:
                return False
        elif in_guess - in_candidate != grays:
            return False

    return True


def filter_words(feedbacks, words) -> list[str]:
    """Words consistent with every feedback in feedbacks, order preserved."""
    words = list(words)
    for feedback in feedbacks:
        words = [w for w in words if is_consistent(feedback, w)]
    return words


def consistent_mask(feedback: Feedback, chars: np.ndarray) -> np.ndarray:
    """
    Vectorised is_consistent over a code-point matrix.

    chars has shape (n, WORD_LENGTH); the result is a boolean array of
    length n that agrees element-wise with is_consistent.
    """
    mask = np.ones(chars.shape[0], dtype=bool)
    guess = feedback.guess

    for i, color in enumerate(feedback.colors):
        g = guess[i]
        code = ord(g)

        if color is Color.GREEN:
            mask &= chars[:, i] == code
            continue

        in_guess = guess.count(g)
        in_candidate = (chars == code).sum(axis=1)
        grays = feedback.gray_count(g)

        if color is Color.YELLOW:
            mask &= chars[:, i] != code
            mask &= in_candidate > 0
            mask &= in_candidate >= in_guess - grays
        else:
            mask &= in_guess - in_candidate == grays

    return mask
