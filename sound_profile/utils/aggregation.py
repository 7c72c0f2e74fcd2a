"""Reduce per-frame feature series to summary statistics."""

import math
from dataclasses import dataclass, field
from typing import Any, Iterable

import numpy as np

from ..collector import CollectedFeatures

# Series reduced by something other than a Summary
SILENCE_FEATURE = "silence"
DYNAMIC_COMPLEXITY_FEATURE = "dynamic_complexity"


@dataclass(frozen=True)
class Summary:
    """Distribution summary of one feature series."""

    mean: float = 0.0
    percentile90: float = 0.0
    std: float = 0.0
    median: float = 0.0
    count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert summary to dictionary."""
        return {
            "mean": self.mean,
            "percentile90": self.percentile90,
            "std": self.std,
            "median": self.median,
            "count": self.count,
        }


EMPTY_SUMMARY = Summary()


def percentile90_index(length: int) -> int:
    """
    Nearest-rank index of the 90th percentile in a sorted series.

    ``floor(0.9 * length)``, clamped to the last element.
    """
    if length <= 0:
        raise ValueError("series is empty")
    return min(int(math.floor(0.9 * length)), length - 1)


def summarize(series: Iterable[float]) -> Summary:
    """
    Summarize a feature series.

    An empty series yields a summary of zeros.

    Args:
        series: Feature values in frame order

    Returns:
        Summary with mean, 90th percentile, standard deviation and median
    """
    values = np.asarray(list(series), dtype=np.float64)
    if values.size == 0:
        return EMPTY_SUMMARY

    ordered = np.sort(values)
    return Summary(
        mean=float(np.mean(values)),
        percentile90=float(ordered[percentile90_index(values.size)]),
        std=float(np.std(values)),
        median=float(np.median(values)),
        count=int(values.size),
    )


def silence_ratio(flags: Iterable[float]) -> float:
    """Fraction of frames flagged silent, or 0 when no frames were analysed."""
    values = list(flags)
    if not values:
        return 0.0
    return sum(1 for flag in values if flag == 1) / len(values)


def summarize_all(series: dict[str, list[float]]) -> dict[str, Summary]:
    """Summarize every series in a mapping."""
    return {name: summarize(values) for name, values in series.items()}


@dataclass
class AggregatedFeatures:
    """Summaries of every feature over one recording."""

    summaries: dict[str, Summary] = field(default_factory=dict)
    silence_ratio: float = 0.0
    dynamic_complexity: list[float] = field(default_factory=list)
    frame_count: int = 0

    def summary(self, name: str) -> Summary:
        """Summary for a feature, or the empty summary if it never ran."""
        return self.summaries.get(name, EMPTY_SUMMARY)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "summaries": {name: s.to_dict() for name, s in self.summaries.items()},
            "silence_ratio": self.silence_ratio,
            "dynamic_complexity": list(self.dynamic_complexity),
            "frame_count": self.frame_count,
        }


class FeatureAggregator:
    """Aggregate collected feature series into summaries."""

    def aggregate(self, collected: CollectedFeatures) -> AggregatedFeatures:
        """
        Reduce collected series to summaries.

        The silence flags become a ratio and the single dynamic complexity
        value is passed through; every other series gets a Summary.

        Args:
            collected: Series gathered by the FeatureCollector

        Returns:
            AggregatedFeatures ready for scoring
        """
        summaries = summarize_all(
            {
                name: values
                for name, values in collected.series.items()
                if name not in (SILENCE_FEATURE, DYNAMIC_COMPLEXITY_FEATURE)
            }
        )

        return AggregatedFeatures(
            summaries=summaries,
            silence_ratio=silence_ratio(collected.get(SILENCE_FEATURE)),
            dynamic_complexity=list(collected.get(DYNAMIC_COMPLEXITY_FEATURE)),
            frame_count=collected.frame_count,
        )
