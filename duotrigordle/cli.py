"""
cli.py

Command line driver for Duotrigordle odds.

Modes:
(default): estimate the greedy solve probability for every dictionary word
-word WORD [WORD ...]: estimate only the listed words
-show WORD: play one session with WORD fixed on board 0 and print it

Optional:
-trials N: sessions per word (default: 10)
-sigma Z: interval width in standard deviations (default: 2)
-csv PATH: also write the raw counts and bounds as CSV
"""

import argparse

import numpy as np

from .display import render_board
from .estimate import DEFAULT_TRIALS, estimate_words
from .session import Duotrigordle
from .stats import DEFAULT_SIGMA
from .words import Lexicon, load_words


def run_estimates(words, args):
    targets = None
    if args.word is not None:
        targets = [w.lower() for w in args.word]

    print(
        f"Estimating {len(targets) if targets is not None else len(words):,} word(s), "
        f"{args.trials} trial(s) each...\n"
    )
    estimates = estimate_words(
        words,
        targets=targets,
        trials=args.trials,
        z=args.sigma,
        workers=args.workers,
        seed=args.seed,
        chunk_size=args.chunk_size,
        progress=args.progress == "bar",
    )

    for est in estimates:
        print(est.report_line(args.sigma))

    if args.csv is not None:
        with open(args.csv, "w", encoding="utf-8") as handle:
            handle.write("word,successes,trials,lower,point,upper\n")
            for est in estimates:
                handle.write(
                    f"{est.word},{est.successes},{est.trials},"
                    f"{est.lower:.6f},{est.point:.6f},{est.upper:.6f}\n"
                )
        print(f"Saved estimates to {args.csv}.")

    return estimates


def run_show(words, word, seed):
    lexicon = Lexicon(words)
    session = Duotrigordle.with_fixed_secret(
        word, lexicon, rng=np.random.default_rng(seed)
    )

    print("Secrets: " + " ".join(session.secrets))
    result = session.solvable_from(0)
    if result is None:
        print(f"Greedy play from {word} gets stuck.")
    else:
        print(f"Greedy play from {word} solves the session.")
    print(render_board(session.boards[0]))

    solvable, starts = session.solveable()
    if solvable:
        print("Solvable starting from: " + " ".join(starts))
    else:
        print("No starting board solves this session greedily.")
    return session


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Probability that greedy play solves Duotrigordle, per starting word."
    )
    parser.add_argument(
        "-trials",
        type=int,
        default=DEFAULT_TRIALS,
        help=f"Random sessions per word (default: {DEFAULT_TRIALS}).",
    )
    parser.add_argument(
        "-sigma",
        type=float,
        default=DEFAULT_SIGMA,
        help="Confidence interval half-width in standard deviations (default: 2).",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Worker processes (default: CPU count).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=1,
        help="Words handed to a worker per task.",
    )
    parser.add_argument(
        "-seed",
        type=int,
        default=None,
        help="Seed for reproducible sampling of secrets.",
    )
    parser.add_argument(
        "-dictionary",
        type=str,
        default=None,
        help="Word list to use instead of the bundled one.",
    )
    parser.add_argument(
        "-progress",
        choices=("bar", "off"),
        default="bar",
        help="Progress output style (default: bar).",
    )
    parser.add_argument(
        "-csv",
        type=str,
        default=None,
        help="Optional CSV path for the per-word results.",
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-word",
        nargs="+",
        metavar="WORD",
        help="Estimate only these words.",
    )
    mode_group.add_argument(
        "-show",
        metavar="WORD",
        help="Play and print one session with WORD fixed on board 0.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    words = load_words(args.dictionary)

    try:
        if args.show is not None:
            run_show(words, args.show.lower(), args.seed)
            return
        run_estimates(words, args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
