"""Normalization of raw feature statistics onto a 0-100 scale."""

from typing import Callable, Sequence

from ..config import DYNAMIC_COMPLEXITY_DEFAULT, INVERSE_UP, LINEAR_DOWN, LINEAR_UP


def linear_up(value: float, scale: float) -> float:
    """``value / scale`` as a percentage, capped at 100."""
    return min(100.0, (value / scale) * 100.0)


def linear_down(value: float, scale: float) -> float:
    """``100 - value * scale``, floored at 0."""
    return max(0.0, 100.0 - value * scale)


def inverse_up(value: float, scale: float) -> float:
    """Complement of ``linear_up``, floored at 0."""
    return max(0.0, 100.0 - linear_up(value, scale))


def normalize_dynamic_complexity(
    series: Sequence[float],
    default: float = DYNAMIC_COMPLEXITY_DEFAULT,
) -> float:
    """
    Normalize the whole-recording dynamic complexity.

    Args:
        series: Zero or one dynamic complexity values
        default: Neutral value used when the computation failed

    Returns:
        ``min(100, value * 10)``, or ``default`` for an empty series
    """
    if len(series) == 0:
        return default
    return min(100.0, series[0] * 10.0)


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


NORMALIZERS: dict[str, Callable[[float, float], float]] = {
    LINEAR_UP: linear_up,
    LINEAR_DOWN: linear_down,
    INVERSE_UP: inverse_up,
}


def apply_normalizer(name: str, value: float, scale: float) -> float:
    """
    Apply a named normalizer.

    Raises:
        ValueError: If the normalizer is unknown
    """
    try:
        normalizer = NORMALIZERS[name]
    except KeyError:
        raise ValueError(f"Unknown normalizer: {name}") from None
    return normalizer(value, scale)
