"""Main analysis pipeline orchestration."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np

from .collector import FeatureCollector
from .config import AnalysisConfig
from .scoring import CharacterScores, ScoreComposer
from .utils import AudioLoader, FeatureAggregator, Summary

logger = logging.getLogger(__name__)


@dataclass
class ProfileResult:
    """Scores and supporting statistics for one recording."""

    scores: CharacterScores = field(default_factory=CharacterScores)
    summaries: dict[str, Summary] = field(default_factory=dict)
    silence_ratio: float = 0.0
    dynamic_complexity: Optional[float] = None
    frame_count: int = 0
    breakdown: dict[str, Any] = field(default_factory=dict)
    failures: dict[str, int] = field(default_factory=dict)
    sample_rate: int = 0
    duration: float = 0.0
    source: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "source": self.source,
            "scores": self.scores.to_dict(),
            "summaries": {name: s.to_dict() for name, s in self.summaries.items()},
            "silence_ratio": self.silence_ratio,
            "dynamic_complexity": self.dynamic_complexity,
            "frame_count": self.frame_count,
            "breakdown": self.breakdown,
            "failures": dict(self.failures),
            "sample_rate": self.sample_rate,
            "duration": self.duration,
        }


class ProfilePipeline:
    """
    Sound profile pipeline.

    Loads audio, collects frame features, summarizes them and composes
    the character scores.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize the pipeline.

        Args:
            config: Analysis configuration
        """
        self.config = config or AnalysisConfig()
        self.loader = AudioLoader()
        self.collector = FeatureCollector(self.config)
        self.aggregator = FeatureAggregator()
        self.composer = ScoreComposer()

        logger.debug(
            f"Initialized ProfilePipeline with {len(self.collector.features)} features: "
            f"{[f.name for f in self.collector.features]}"
        )

    def analyze_file(self, file_path: Union[str, Path]) -> ProfileResult:
        """
        Analyze a WAV file.

        Args:
            file_path: Path to WAV file

        Returns:
            ProfileResult

        Raises:
            AudioLoadError: If the file cannot be loaded
        """
        file_path = Path(file_path)
        logger.info(f"Analyzing: {file_path}")

        audio, sr = self.loader.load(file_path)
        logger.debug(f"Loaded audio: {len(audio)} samples at {sr}Hz")

        result = self.analyze_array(audio, sr)
        result.source = str(file_path)
        return result

    def analyze_array(self, audio: np.ndarray, sr: int) -> ProfileResult:
        """
        Analyze a mono sample buffer.

        Args:
            audio: Mono samples
            sr: Sample rate

        Returns:
            ProfileResult
        """
        collected = self.collector.collect(audio, sr)
        aggregated = self.aggregator.aggregate(collected)
        scores = self.composer.compose(aggregated)

        if collected.frame_count == 0:
            logger.warning(
                f"Audio shorter than one frame ({len(audio)} < {self.config.frame_size} samples)"
            )
        if collected.failure_count:
            logger.info(f"{collected.failure_count} feature computations failed and were skipped")

        dynamic = aggregated.dynamic_complexity
        return ProfileResult(
            scores=scores,
            summaries=aggregated.summaries,
            silence_ratio=aggregated.silence_ratio,
            dynamic_complexity=dynamic[0] if dynamic else None,
            frame_count=collected.frame_count,
            breakdown=self.composer.breakdown(aggregated),
            failures=collected.failures,
            sample_rate=sr,
            duration=len(audio) / sr,
        )


def analyze(
    file_path: Union[str, Path],
    config: Optional[AnalysisConfig] = None,
) -> dict[str, float]:
    """
    Convenience function to score a single file.

    Args:
        file_path: Path to WAV file
        config: Optional configuration

    Returns:
        Dictionary of the five scores
    """
    pipeline = ProfilePipeline(config=config)
    return pipeline.analyze_file(file_path).scores.to_dict()
