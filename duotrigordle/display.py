"""
display.py

Terminal rendering of feedback using ANSI background colors.
"""

from .patterns import Color


GREEN = "\x1b[30;42m"
YELLOW = "\x1b[30;43m"
GRAY = "\x1b[30;47m"
RESET = "\x1b[0m"

_STYLES = {
    Color.GREEN: GREEN,
    Color.YELLOW: YELLOW,
    Color.GRAY: GRAY,
}


def render_feedback(feedback) -> str:
    cells = "".join(
        f"{_STYLES[color]}{letter}"
        for letter, color in zip(feedback.guess, feedback.colors)
    )
    return cells + RESET


def render_board(board) -> str:
    """One rendered line per guess recorded on board."""
    return "\n".join(render_feedback(f) for f in board.history)
