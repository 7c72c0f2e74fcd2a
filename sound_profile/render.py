"""Text rendering of scores as progress bars."""

import math

from .scoring import CharacterScores

BAR_WIDTH = 20
LABEL_WIDTH = 15


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def render_bar(score: float, width: int = BAR_WIDTH, fill: str = "#", empty: str = "-") -> str:
    """
    Render a 0-100 score as a fixed-width bar.

    Out-of-range scores are clamped, so the bar is always ``width`` long.
    """
    if math.isnan(score):
        score = 0.0
    score = max(0.0, min(100.0, score))
    filled = _round_half_up(score / (100.0 / width))
    filled = max(0, min(width, filled))
    return fill * filled + empty * (width - filled)


def format_percent(score: float) -> str:
    if not math.isfinite(score):
        score = 0.0 if math.isnan(score) else max(0.0, min(100.0, score))
    return f"{_round_half_up(score)}%"


def format_line(label: str, score: float) -> str:
    """``"<label>: <bar> <percent>"`` with the label padded to a fixed column."""
    return f"{label + ':':<{LABEL_WIDTH}} {render_bar(score)} {format_percent(score)}"


def render_scores(scores: CharacterScores) -> list[str]:
    """One formatted line per score, in display order."""
    return [format_line(label, value) for label, value in scores.items()]
