"""Low and high band energy of the frame spectrum."""

from .base import BaseFeature, FrameContext


class LowBandEnergyFeature(BaseFeature):
    """Mean squared magnitude of the lowest tenth of the spectrum."""

    name = "low_energy"

    def compute(self, context: FrameContext) -> float:
        low, _ = context.band_energies
        return low


class HighBandEnergyFeature(BaseFeature):
    """Mean squared magnitude above the band split."""

    name = "high_energy"

    def compute(self, context: FrameContext) -> float:
        _, high = context.band_energies
        return high
