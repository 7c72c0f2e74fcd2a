# Sound profile analysis
# Scores aggressiveness, tonality, softness, high-low balance and density of a recording

from .collector import CollectedFeatures, FeatureCollector
from .config import AnalysisConfig
from .extractors import BaseFeature, FeatureOutcome, FrameContext
from .framing import frame_offsets, iter_frames
from .pipeline import ProfilePipeline, ProfileResult, analyze
from .render import render_bar, render_scores
from .scoring import CharacterScores, ScoreComposer, compose_scores
from .spectral import ComputationError
from .utils import AudioLoader, AudioLoadError, FeatureAggregator, Summary, summarize
from .utils.aggregation import AggregatedFeatures

__all__ = [
    # Config
    "AnalysisConfig",
    # Pipeline
    "ProfilePipeline",
    "ProfileResult",
    "analyze",
    # Framing and collection
    "frame_offsets",
    "iter_frames",
    "FeatureCollector",
    "CollectedFeatures",
    # Features
    "BaseFeature",
    "FeatureOutcome",
    "FrameContext",
    "ComputationError",
    # Summaries and scores
    "Summary",
    "summarize",
    "FeatureAggregator",
    "AggregatedFeatures",
    "CharacterScores",
    "ScoreComposer",
    "compose_scores",
    # Rendering
    "render_bar",
    "render_scores",
    # Loading
    "AudioLoader",
    "AudioLoadError",
]

ANALYZER_VERSION = "1.0.0"
