"""Harmonic descriptors computed from spectral peaks."""

from .. import spectral
from .base import BaseFeature, FrameContext


class DissonanceFeature(BaseFeature):
    """Sensory dissonance between spectral peaks."""

    name = "dissonance"

    def compute(self, context: FrameContext) -> float:
        frequencies, magnitudes = context.peaks
        return spectral.dissonance(frequencies, magnitudes)


class PitchSalienceFeature(BaseFeature):
    """How clearly a single pitch stands out in the spectrum."""

    name = "pitch_salience"

    def compute(self, context: FrameContext) -> float:
        return spectral.pitch_salience(context.spectrum, context.sample_rate)


class InharmonicityFeature(BaseFeature):
    """Deviation of the peaks from a harmonic series."""

    name = "inharmonicity"

    def compute(self, context: FrameContext) -> float:
        frequencies, magnitudes = context.peaks
        return spectral.inharmonicity(frequencies, magnitudes)


class PeakCountFeature(BaseFeature):
    """
    Number of spectral peaks between 20 Hz and Nyquist.

    Uses its own peak picking (50 peaks max, magnitude ordered) rather
    than the frequency-ordered peaks shared by the harmonic descriptors.
    """

    name = "peak_count"

    def compute(self, context: FrameContext) -> float:
        config = context.config
        frequencies, _ = spectral.spectral_peaks(
            context.spectrum,
            context.sample_rate,
            max_peaks=config.peak_max_count,
            min_frequency=config.peak_min_frequency,
            max_frequency=context.nyquist,
            magnitude_threshold=config.peak_magnitude_threshold,
            order_by="magnitude",
        )
        return float(len(frequencies))
