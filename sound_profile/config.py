"""Configuration for the sound profile analysis pipeline."""

from dataclasses import dataclass
from typing import Any


@dataclass
class AnalysisConfig:
    """Configuration settings for frame analysis."""

    # Framing
    frame_size: int = 4096
    hop_size: int = 2048
    window: str = "blackmanharris62"

    # Spectral descriptors
    rolloff_cutoff: float = 0.85
    band_split_ratio: float = 0.1
    complexity_magnitude_threshold: float = 0.005

    # Peak picking for the density peak count
    peak_max_count: int = 50
    peak_min_frequency: float = 20.0
    peak_magnitude_threshold: float = 1e-6

    # Frames whose energy falls below this are flagged silent
    silence_threshold: float = 0.001

    # Loudness frame length used by dynamic complexity (seconds)
    dynamic_frame_seconds: float = 0.2

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "frame_size": self.frame_size,
            "hop_size": self.hop_size,
            "window": self.window,
            "rolloff_cutoff": self.rolloff_cutoff,
            "band_split_ratio": self.band_split_ratio,
            "complexity_magnitude_threshold": self.complexity_magnitude_threshold,
            "peak_max_count": self.peak_max_count,
            "peak_min_frequency": self.peak_min_frequency,
            "peak_magnitude_threshold": self.peak_magnitude_threshold,
            "silence_threshold": self.silence_threshold,
            "dynamic_frame_seconds": self.dynamic_frame_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisConfig":
        """Create config from dictionary."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})


@dataclass(frozen=True)
class ScoreTerm:
    """One weighted contribution to a character score."""

    feature: str
    weight: float
    normalizer: str
    scale: float = 1.0
    statistic: str = "mean"


# Normalizer names understood by the score composer
LINEAR_UP = "linear_up"
LINEAR_DOWN = "linear_down"
INVERSE_UP = "inverse_up"
DYNAMIC = "dynamic"

# Statistic used for the silence term (not a Summary field)
SILENCE_RATIO = "ratio"

# Fallbacks for missing data
DYNAMIC_COMPLEXITY_DEFAULT = 50.0
BALANCE_DEFAULT = 50.0

SCORE_ORDER: tuple[str, ...] = (
    "aggressiveness",
    "tonality",
    "softness",
    "high_low_balance",
    "density",
)

SCORE_LABELS: dict[str, str] = {
    "aggressiveness": "Aggressiveness",
    "tonality": "Tonality",
    "softness": "Softness",
    "high_low_balance": "High-Low Bal",
    "density": "Density",
}

# Weighted score table. High-low balance is a ratio of band energies and
# is computed outside this table.
SCORE_TABLE: dict[str, tuple[ScoreTerm, ...]] = {
    "aggressiveness": (
        ScoreTerm("hfc", 0.25, LINEAR_UP, 10000.0),
        ScoreTerm("centroid", 0.20, LINEAR_UP, 10000.0),
        ScoreTerm("complexity", 0.15, LINEAR_UP, 20.0),
        ScoreTerm("dissonance", 0.15, LINEAR_UP, 0.5),
        ScoreTerm("flux", 0.15, LINEAR_UP, 0.1),
        ScoreTerm("dynamic_complexity", 0.10, DYNAMIC),
    ),
    "tonality": (
        ScoreTerm("pitch_salience", 0.35, LINEAR_UP, 1.0),
        ScoreTerm("inharmonicity", 0.35, LINEAR_DOWN, 1000.0),
        ScoreTerm("entropy", 0.20, LINEAR_DOWN, 12.0),
    ),
    "softness": (
        ScoreTerm("rolloff", 0.25, LINEAR_DOWN, 0.01),
        ScoreTerm("loudness", 0.35, INVERSE_UP, 2000.0),
        ScoreTerm("zcr", 0.20, LINEAR_DOWN, 200.0),
        ScoreTerm("loudness", 0.20, INVERSE_UP, 3000.0, statistic="percentile90"),
    ),
    "density": (
        ScoreTerm("peak_count", 0.35, LINEAR_UP, 15.0),
        ScoreTerm("silence", 0.25, LINEAR_DOWN, 100.0, statistic=SILENCE_RATIO),
        ScoreTerm("complexity", 0.25, LINEAR_UP, 10.0),
        ScoreTerm("flatness", 0.15, LINEAR_DOWN, 100.0),
    ),
}

SCORE_OFFSETS: dict[str, float] = {
    "tonality": 0.1,
}
