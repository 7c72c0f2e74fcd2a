"""Spectral shape descriptors: brightness, spread and change over time."""

from .. import spectral
from .base import BaseFeature, FrameContext


class HFCFeature(BaseFeature):
    """High frequency content of the frame spectrum."""

    name = "hfc"

    def compute(self, context: FrameContext) -> float:
        return spectral.hfc(context.spectrum, context.sample_rate)


class CentroidFeature(BaseFeature):
    """Spectral centroid in Hz."""

    name = "centroid"

    def compute(self, context: FrameContext) -> float:
        return spectral.centroid(context.spectrum) * context.nyquist


class ComplexityFeature(BaseFeature):
    """Number of significant spectral peaks."""

    name = "complexity"

    def compute(self, context: FrameContext) -> float:
        return spectral.spectral_complexity(
            context.spectrum,
            context.sample_rate,
            magnitude_threshold=context.config.complexity_magnitude_threshold,
        )


class EntropyFeature(BaseFeature):
    """Shannon entropy of the magnitude spectrum."""

    name = "entropy"

    def compute(self, context: FrameContext) -> float:
        return spectral.entropy(context.spectrum)


class RolloffFeature(BaseFeature):
    """Spectral rolloff frequency in Hz."""

    name = "rolloff"

    def compute(self, context: FrameContext) -> float:
        return spectral.rolloff(
            context.spectrum,
            context.sample_rate,
            cutoff=context.config.rolloff_cutoff,
        )


class FlatnessFeature(BaseFeature):
    """Spectral flatness (noisiness)."""

    name = "flatness"

    def compute(self, context: FrameContext) -> float:
        return spectral.flatness(context.spectrum)


class FluxFeature(BaseFeature):
    """
    Spectral flux against the frame one hop earlier.

    Reuses the previous frame's cached spectrum; the first frame of a
    recording has no predecessor and never produces a value.
    """

    name = "flux"
    requires_previous = True

    def compute(self, context: FrameContext) -> float:
        if context.previous is None:
            raise spectral.ComputationError("flux: no previous frame")
        return spectral.flux(context.previous.spectrum, context.spectrum)
