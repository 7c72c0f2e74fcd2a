"""Frame-wise feature collection."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from .config import AnalysisConfig
from .extractors import BaseFeature, FeatureOutcome, FrameContext, default_features
from .framing import iter_frames

logger = logging.getLogger(__name__)


@dataclass
class CollectedFeatures:
    """Per-feature value series gathered over one recording."""

    series: dict[str, list[float]] = field(default_factory=dict)
    frame_count: int = 0
    sample_rate: int = 0

    # Number of failed computations per feature
    failures: dict[str, int] = field(default_factory=dict)

    def get(self, name: str) -> list[float]:
        return self.series.get(name, [])

    @property
    def failure_count(self) -> int:
        return sum(self.failures.values())


class FeatureCollector:
    """
    Run every feature over every frame of a recording.

    Each feature is isolated: a failure is counted and the value is left
    out of that feature's series, without affecting other features or
    frames. Buffer-scope features run once after the frame loop.
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        features: Optional[Iterable[BaseFeature]] = None,
    ):
        """
        Initialize the collector.

        Args:
            config: Analysis configuration
            features: Feature instances to run (None for the full set)
        """
        self.config = config or AnalysisConfig()
        self.features = list(features) if features is not None else default_features()
        self.frame_features = [f for f in self.features if f.scope == "frame"]
        self.buffer_features = [f for f in self.features if f.scope == "buffer"]

    def collect(self, audio: np.ndarray, sample_rate: int) -> CollectedFeatures:
        """
        Collect feature series from a mono sample buffer.

        Args:
            audio: Mono samples
            sample_rate: Sample rate in Hz

        Returns:
            CollectedFeatures with one series per feature
        """
        if sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {sample_rate}")

        audio = np.asarray(audio, dtype=np.float64)
        series: dict[str, list[float]] = {f.name: [] for f in self.features}
        failures: Counter = Counter()

        previous: Optional[FrameContext] = None
        frame_count = 0

        for offset, frame in iter_frames(audio, self.config.frame_size, self.config.hop_size):
            context = FrameContext(
                frame,
                sample_rate,
                config=self.config,
                offset=offset,
                previous=previous,
            )
            for feature in self.frame_features:
                if feature.requires_previous and previous is None:
                    continue
                self._record(feature.extract(context), series, failures)

            # Keep a single frame of history
            context.previous = None
            previous = context
            frame_count += 1

        whole = FrameContext(audio, sample_rate, config=self.config)
        for feature in self.buffer_features:
            self._record(feature.extract(whole), series, failures)

        logger.debug(
            f"Collected {frame_count} frames, {sum(failures.values())} failed computations"
        )
        if failures:
            logger.debug(f"Failures by feature: {dict(failures)}")

        return CollectedFeatures(
            series=series,
            frame_count=frame_count,
            sample_rate=sample_rate,
            failures=dict(failures),
        )

    @staticmethod
    def _record(
        outcome: FeatureOutcome,
        series: dict[str, list[float]],
        failures: Counter,
    ) -> None:
        if outcome.ok:
            series[outcome.feature_name].append(outcome.value)
        else:
            failures[outcome.feature_name] += 1
