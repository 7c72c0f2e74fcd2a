"""Base class for all per-frame feature computations."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import Optional

import numpy as np

from .. import spectral
from ..config import AnalysisConfig
from ..spectral import ComputationError

logger = logging.getLogger(__name__)


@dataclass
class FeatureOutcome:
    """Result of a single feature computation: a value or an error, never both."""

    feature_name: str
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FrameContext:
    """
    A block of samples plus the spectral views derived from it.

    Derived views are computed on first access and cached, so features
    sharing a frame share one windowing and one FFT. A failed derivation
    is not cached and raises again for the next feature that needs it.
    """

    def __init__(
        self,
        samples: np.ndarray,
        sample_rate: int,
        config: Optional[AnalysisConfig] = None,
        offset: int = 0,
        previous: Optional["FrameContext"] = None,
    ):
        """
        Args:
            samples: Frame samples (or the whole buffer for buffer-scope features)
            sample_rate: Sample rate of the recording
            config: Analysis configuration
            offset: Start offset of the frame in the recording
            previous: Context of the frame one hop earlier, if any
        """
        self.samples = samples
        self.sample_rate = sample_rate
        self.config = config or AnalysisConfig()
        self.offset = offset
        self.previous = previous

    @property
    def nyquist(self) -> float:
        return self.sample_rate / 2.0

    @cached_property
    def windowed(self) -> np.ndarray:
        return spectral.window(self.samples, self.config.window)

    @cached_property
    def spectrum(self) -> np.ndarray:
        return spectral.spectrum(self.windowed)

    @cached_property
    def peaks(self) -> tuple[np.ndarray, np.ndarray]:
        """Frequency-ordered spectral peaks used by the harmonic descriptors."""
        return spectral.spectral_peaks(self.spectrum, self.sample_rate)

    @cached_property
    def band_energies(self) -> tuple[float, float]:
        return spectral.band_energies(self.spectrum, self.config.band_split_ratio)


class BaseFeature(ABC):
    """Base class for all feature computations."""

    name: str = ""

    # "frame" features run once per frame, "buffer" features once per recording
    scope: str = "frame"

    # Features needing the previous frame are skipped on the first frame
    requires_previous: bool = False

    @abstractmethod
    def compute(self, context: FrameContext) -> float:
        """
        Compute the feature value.

        Args:
            context: Frame (or whole buffer) under analysis

        Returns:
            Scalar feature value

        Raises:
            ComputationError: If the feature cannot be computed
        """
        pass

    def extract(self, context: FrameContext) -> FeatureOutcome:
        """
        Compute the feature, converting any failure into an error outcome.

        Args:
            context: Frame (or whole buffer) under analysis

        Returns:
            FeatureOutcome holding either the value or the error message
        """
        try:
            value = float(self.compute(context))
        except ComputationError as e:
            logger.debug(f"{self.name} failed at offset {context.offset}: {e}")
            return FeatureOutcome(feature_name=self.name, error=str(e))
        except Exception as e:
            logger.debug(f"{self.name} raised {type(e).__name__} at offset {context.offset}: {e}")
            return FeatureOutcome(feature_name=self.name, error=f"{type(e).__name__}: {e}")

        if not np.isfinite(value):
            return FeatureOutcome(feature_name=self.name, error="non-finite value")

        return FeatureOutcome(feature_name=self.name, value=value)
