# Feature computations

from .base import BaseFeature, FeatureOutcome, FrameContext
from .energy import HighBandEnergyFeature, LowBandEnergyFeature
from .harmonic import (
    DissonanceFeature,
    InharmonicityFeature,
    PeakCountFeature,
    PitchSalienceFeature,
)
from .spectral_shape import (
    CentroidFeature,
    ComplexityFeature,
    EntropyFeature,
    FlatnessFeature,
    FluxFeature,
    HFCFeature,
    RolloffFeature,
)
from .temporal import (
    DynamicComplexityFeature,
    LoudnessFeature,
    SilenceFeature,
    ZeroCrossingRateFeature,
)

DEFAULT_FEATURES = [
    HFCFeature,
    CentroidFeature,
    ComplexityFeature,
    DissonanceFeature,
    PitchSalienceFeature,
    InharmonicityFeature,
    EntropyFeature,
    RolloffFeature,
    LoudnessFeature,
    ZeroCrossingRateFeature,
    FluxFeature,
    LowBandEnergyFeature,
    HighBandEnergyFeature,
    FlatnessFeature,
    PeakCountFeature,
    SilenceFeature,
    DynamicComplexityFeature,
]


def default_features() -> list[BaseFeature]:
    """Instantiate the full feature set."""
    return [cls() for cls in DEFAULT_FEATURES]


__all__ = [
    "BaseFeature",
    "FeatureOutcome",
    "FrameContext",
    "DEFAULT_FEATURES",
    "default_features",
    "HFCFeature",
    "CentroidFeature",
    "ComplexityFeature",
    "DissonanceFeature",
    "PitchSalienceFeature",
    "InharmonicityFeature",
    "EntropyFeature",
    "RolloffFeature",
    "LoudnessFeature",
    "ZeroCrossingRateFeature",
    "FluxFeature",
    "LowBandEnergyFeature",
    "HighBandEnergyFeature",
    "FlatnessFeature",
    "PeakCountFeature",
    "SilenceFeature",
    "DynamicComplexityFeature",
]
