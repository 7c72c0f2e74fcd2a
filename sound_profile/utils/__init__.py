"""Utility functions for sound profile analysis."""

from .audio_loader import AudioLoader, AudioLoadError
from .aggregation import AggregatedFeatures, FeatureAggregator, Summary, summarize
from .normalization import linear_down, linear_up, normalize_dynamic_complexity

__all__ = [
    "AudioLoader",
    "AudioLoadError",
    "AggregatedFeatures",
    "FeatureAggregator",
    "Summary",
    "summarize",
    "linear_up",
    "linear_down",
    "normalize_dynamic_complexity",
]
