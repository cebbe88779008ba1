"""
session.py

A Duotrigordle session: 32 boards played with one shared guess sequence,
and the greedy check that decides whether the session can be solved
without ever guessing blind.

Candidate sets are kept as arrays of indices into the shared Lexicon.
They only shrink while guesses accumulate and are restored to the full
dictionary by reset().
"""

import numpy as np

from .board import Board
from .words import Lexicon, validate_word


BOARD_COUNT = 32


def _as_lexicon(words):
    return words if isinstance(words, Lexicon) else Lexicon(words)


def sample_secrets(lexicon: Lexicon, rng=None, fixed=None) -> list[str]:
    """
    Draw BOARD_COUNT distinct secrets uniformly without replacement.

    When fixed is given it becomes board 0's secret and the remaining
    boards are drawn from the dictionary without it.
    """
    rng = np.random.default_rng() if rng is None else rng
    pool = lexicon.distinct()
    chosen = []

    if fixed is not None:
        validate_word(fixed)
        pool = [w for w in pool if w != fixed]
        chosen.append(fixed)

    needed = BOARD_COUNT - len(chosen)
    if len(pool) < needed:
        raise ValueError(
            f"dictionary has {len(pool)} distinct words available, "
            f"need {needed} to fill {BOARD_COUNT} boards"
        )

    picks = rng.choice(len(pool), size=needed, replace=False)
    return chosen + [pool[i] for i in picks]


class Duotrigordle:
    """
    Boards, candidate sets and solved flags are index aligned: slot i of
    each belongs to board i.
    """

    def __init__(self, lexicon, rng=None, fixed=None):
        lexicon = _as_lexicon(lexicon)
        self._install(lexicon, sample_secrets(lexicon, rng=rng, fixed=fixed))

    @classmethod
    def with_fixed_secret(cls, fixed: str, lexicon, rng=None):
        return cls(lexicon, rng=rng, fixed=fixed)

    @classmethod
    def from_secrets(cls, lexicon, secrets):
        """Session with the given secrets on boards 0..31, in order."""
        session = cls.__new__(cls)
        session._install(_as_lexicon(lexicon), list(secrets))
        return session

    def _install(self, lexicon: Lexicon, secrets: list[str]):
        if len(secrets) != BOARD_COUNT:
            raise ValueError(
                f"a session needs {BOARD_COUNT} secrets, got {len(secrets)}"
            )
        if len(set(secrets)) != BOARD_COUNT:
            raise ValueError("session secrets must be distinct")
        for secret in secrets:
            validate_word(secret)

        self.lexicon = lexicon
        self.boards = [Board(secret) for secret in secrets]
        self._everything = np.arange(len(lexicon))
        self.reset()

    def __repr__(self):
        return (
            f"Duotrigordle(words={len(self.lexicon)}, "
            f"unsolved={self.unsolved_count()})"
        )

    @property
    def secrets(self) -> list[str]:
        return [board.secret for board in self.boards]

    @property
    def solved(self) -> tuple:
        return tuple(self._solved)

    def unsolved_count(self) -> int:
        return self._solved.count(False)

    def candidates(self, index: int) -> list[str]:
        return self.lexicon.words_at(self._candidates[index])

    def candidate_count(self, index: int) -> int:
        return len(self._candidates[index])

    def guesses(self, index: int) -> tuple:
        return self.boards[index].history

    def guess(self, word: str) -> tuple:
        """
        Play word on every board and return the feedback each board produced.

        word need not be in the dictionary. A board whose secret is word is
        marked solved and narrows one last time; its candidate set is frozen
        from then on. Every other unsolved board narrows with its own
        feedback for word.
        """
        validate_word(word)
        feedbacks = tuple(board.guess(word) for board in self.boards)

        for i, board in enumerate(self.boards):
            if board.secret == word:
                self._solved[i] = True
            elif self._solved[i]:
                continue
            self._candidates[i] = board.narrow_last(self.lexicon, self._candidates[i])

        return feedbacks

    def solvable_from(self, index: int):
        """
        Replay the session greedily starting with board index's secret.

        After each guess some unsolved board must be down to exactly one
        candidate, which becomes the next guess. Returns board index's
        secret once at most one board is left unsolved, or None as soon as
        no unsolved board is uniquely determined. There is no lookahead and
        no backtracking, so None does not mean the position is unsolvable.
        """
        self.reset()
        word = self.boards[index].secret

        while self.unsolved_count() > 1:
            self.guess(word)

            open_boards = [
                (len(self._candidates[i]), i)
                for i in range(BOARD_COUNT)
                if not self._solved[i]
            ]
            smallest = min(size for size, _ in open_boards)
            if smallest != 1:
                return None

            determined = next(i for size, i in open_boards if size == 1)
            word = self.lexicon.words[self._candidates[determined][0]]

        return self.boards[index].secret

    def solveable(self):
        """
        Run solvable_from for every board.

        Returns (True if any start succeeded, secrets of successful starts).
        """
        answers = []
        for i in range(BOARD_COUNT):
            answer = self.solvable_from(i)
            if answer is not None:
                answers.append(answer)
        return len(answers) > 0, answers

    def reset(self):
        for board in self.boards:
            board.clear()
        self._solved = [False] * BOARD_COUNT
        self._candidates = [self._everything] * BOARD_COUNT
