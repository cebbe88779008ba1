"""
estimate.py

Monte Carlo estimate, per dictionary word, of how often the greedy check
solves a random session when that word is fixed as one of the secrets.

Each word is an independent task: it builds its own sessions from a
private random stream and only reads the shared lexicon. Tasks run on a
process pool and results come back in dictionary order.
"""

import multiprocessing as mp
import os
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from .session import Duotrigordle
from .stats import DEFAULT_SIGMA, confidence_interval, format_estimate
from .words import Lexicon, validate_word


DEFAULT_TRIALS = 10


_WORKER_STATE = {}


@dataclass(frozen=True)
class WordEstimate:
    word: str
    successes: int
    trials: int
    lower: float
    point: float
    upper: float

    def report_line(self, z=DEFAULT_SIGMA):
        return format_estimate(self.word, (self.lower, self.point, self.upper), z)


def estimate_word(word, lexicon, trials, rng=None):
    """Return (successes, trials) for sessions with word fixed on board 0."""
    rng = np.random.default_rng() if rng is None else rng
    successes = 0
    for _ in range(trials):
        session = Duotrigordle.with_fixed_secret(word, lexicon, rng=rng)
        if session.solvable_from(0) is not None:
            successes += 1
    return successes, trials


def _init_worker(words):
    _WORKER_STATE["lexicon"] = Lexicon(words)


def _worker_estimate(task):
    word, trials, seed = task
    rng = np.random.default_rng(seed)
    return estimate_word(word, _WORKER_STATE["lexicon"], trials, rng=rng)


def estimate_words(
    dictionary,
    targets=None,
    trials=DEFAULT_TRIALS,
    z=DEFAULT_SIGMA,
    workers=None,
    seed=None,
    chunk_size=1,
    progress=True,
):
    """
    Estimate the greedy solve probability for each word in targets.

    targets defaults to the whole dictionary. Every target gets its own
    random stream spawned from SeedSequence(seed), so a fixed seed gives
    the same results regardless of worker count.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    words = list(dictionary)
    targets = words if targets is None else list(targets)
    lexicon = Lexicon(words)
    for word in targets:
        validate_word(word)

    worker_count = workers if workers is not None else (os.cpu_count() or 1)
    worker_count = max(1, int(worker_count))
    chunk_size = max(1, int(chunk_size))

    seeds = np.random.SeedSequence(seed).spawn(len(targets))
    tasks = [(word, trials, s) for word, s in zip(targets, seeds)]

    bar = tqdm(total=len(tasks), desc="Words", disable=not progress)
    counts = []

    if worker_count == 1 or len(tasks) <= 1:
        for word, _, s in tasks:
            rng = np.random.default_rng(s)
            counts.append(estimate_word(word, lexicon, trials, rng=rng))
            bar.update(1)
    else:
        start_methods = mp.get_all_start_methods()
        start_method = "fork" if "fork" in start_methods else "spawn"
        ctx = mp.get_context(start_method)
        with ctx.Pool(
            processes=worker_count,
            initializer=_init_worker,
            initargs=(words,),
        ) as pool:
            for result in pool.imap(_worker_estimate, tasks, chunksize=chunk_size):
                counts.append(result)
                bar.update(1)

    bar.close()

    estimates = []
    for word, (successes, total) in zip(targets, counts):
        lower, point, upper = confidence_interval(successes, total, z)
        estimates.append(WordEstimate(word, successes, total, lower, point, upper))
    return estimates
