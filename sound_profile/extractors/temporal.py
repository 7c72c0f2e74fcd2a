"""Time-domain descriptors."""

from .. import spectral
from .base import BaseFeature, FrameContext


class LoudnessFeature(BaseFeature):
    """Stevens' power law loudness of the raw frame."""

    name = "loudness"

    def compute(self, context: FrameContext) -> float:
        return spectral.loudness(context.samples)


class ZeroCrossingRateFeature(BaseFeature):
    """Zero-crossing rate of the raw frame."""

    name = "zcr"

    def compute(self, context: FrameContext) -> float:
        return spectral.zero_crossing_rate(context.samples)


class SilenceFeature(BaseFeature):
    """1.0 when the frame energy is below the silence threshold, else 0.0."""

    name = "silence"

    def compute(self, context: FrameContext) -> float:
        if spectral.energy(context.samples) < context.config.silence_threshold:
            return 1.0
        return 0.0


class DynamicComplexityFeature(BaseFeature):
    """Loudness fluctuation over the whole recording, computed once."""

    name = "dynamic_complexity"
    scope = "buffer"

    def compute(self, context: FrameContext) -> float:
        return spectral.dynamic_complexity(
            context.samples,
            context.sample_rate,
            frame_seconds=context.config.dynamic_frame_seconds,
        )
