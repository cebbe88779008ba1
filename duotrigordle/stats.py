"""
stats.py

Confidence intervals for repeated solve trials.
"""

import numpy as np


DEFAULT_SIGMA = 2.0


def confidence_interval(successes, trials, z=DEFAULT_SIGMA):
    """
    Normal approximation to a binomial proportion.

    Returns (lower, point, upper) where point = successes / trials and the
    bounds sit z standard errors either side. The bounds are not clamped
    to [0, 1]. Zero trials gives NaNs; callers should run at least one.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        point = np.float64(successes) / np.float64(trials)
        margin = z * np.sqrt(point * (1.0 - point) / trials)
    return float(point - margin), float(point), float(point + margin)


def format_estimate(word, interval, z=DEFAULT_SIGMA):
    """Report line, e.g. 'Guess crane p: 50.00% 2σ[27.64% - 72.36%]'."""
    lower, point, upper = interval
    return (
        f"Guess {word} p: {point * 100:.2f}% "
        f"{z:g}σ[{lower * 100:.2f}% - {upper * 100:.2f}%]"
    )
