"""Spectral and temporal descriptor primitives.

Thin wrappers over ``essentia.standard`` algorithms. Inputs are cast to
the float32 vectors Essentia expects, and any failure inside Essentia
surfaces as ``ComputationError`` so callers can skip the descriptor for
that frame.
"""

import math
from contextlib import contextmanager
from functools import lru_cache
from typing import Optional

import numpy as np


class ComputationError(Exception):
    """Raised when a descriptor cannot be computed from its input."""

    pass


# Essentia's own SpectralPeaks defaults, used for the harmonic descriptors
DEFAULT_MAX_PEAKS = 100
DEFAULT_MAX_FREQUENCY = 5000.0


def _standard():
    import essentia.standard as es

    return es


@lru_cache(maxsize=None)
def _algorithm(name: str, **params):
    """Configured Essentia algorithm, created once per parameter set."""
    return getattr(_standard(), name)(**params)


@contextmanager
def _essentia_errors(name: str):
    try:
        yield
    except RuntimeError as e:
        raise ComputationError(f"{name}: {e}") from e


def _as_real(values, name: str) -> np.ndarray:
    array = np.ascontiguousarray(values, dtype=np.float32)
    if array.ndim != 1 or array.size == 0:
        raise ComputationError(f"{name}: expected a non-empty 1-D array")
    if not np.isfinite(array).all():
        raise ComputationError(f"{name}: input contains non-finite values")
    return array


def _as_peaks(frequencies, magnitudes, name: str) -> tuple[np.ndarray, np.ndarray]:
    freqs = np.ascontiguousarray(frequencies, dtype=np.float32)
    mags = np.ascontiguousarray(magnitudes, dtype=np.float32)
    if freqs.ndim != 1 or mags.ndim != 1:
        raise ComputationError(f"{name}: peaks must be 1-D arrays")
    return freqs, mags


def window(frame, kind: str = "blackmanharris62", normalized: bool = True) -> np.ndarray:
    """
    Apply an analysis window to a frame.

    Args:
        frame: Time-domain samples
        kind: Essentia window type ("blackmanharris62", "hann", ...)
        normalized: Scale the window so its samples sum to 2

    Returns:
        Windowed frame
    """
    samples = _as_real(frame, "window")
    with _essentia_errors("window"):
        return _algorithm("Windowing", type=kind, normalized=normalized)(samples)


def spectrum(windowed) -> np.ndarray:
    """Magnitude spectrum of a windowed frame (N/2 + 1 bins)."""
    samples = _as_real(windowed, "spectrum")
    with _essentia_errors("spectrum"):
        return _algorithm("Spectrum")(samples)


def energy(frame) -> float:
    """Sum of squared samples."""
    samples = _as_real(frame, "energy")
    with _essentia_errors("energy"):
        return float(_algorithm("Energy")(samples))


def hfc(magnitudes, sample_rate: float) -> float:
    """High frequency content: squared magnitudes weighted by bin frequency."""
    spec = _as_real(magnitudes, "hfc")
    with _essentia_errors("hfc"):
        return float(_algorithm("HFC", sampleRate=float(sample_rate))(spec))


def centroid(magnitudes) -> float:
    """Spectral centroid as a fraction of the Nyquist frequency."""
    spec = _as_real(magnitudes, "centroid")
    with _essentia_errors("centroid"):
        return float(_algorithm("Centroid", range=1.0)(spec))


def spectral_peaks(
    magnitudes,
    sample_rate: float,
    max_peaks: int = DEFAULT_MAX_PEAKS,
    min_frequency: float = 0.0,
    max_frequency: Optional[float] = DEFAULT_MAX_FREQUENCY,
    magnitude_threshold: float = 0.0,
    order_by: str = "frequency",
) -> tuple[np.ndarray, np.ndarray]:
    """
    Interpolated local maxima of a magnitude spectrum.

    Args:
        magnitudes: Magnitude spectrum
        sample_rate: Sample rate of the analysed audio
        max_peaks: Maximum number of peaks returned
        min_frequency: Lowest peak frequency (Hz)
        max_frequency: Highest peak frequency (Hz), capped at Nyquist; None means Nyquist
        magnitude_threshold: Peaks must exceed this magnitude
        order_by: "frequency" or "magnitude"

    Returns:
        Tuple of (frequencies in Hz, magnitudes)
    """
    spec = _as_real(magnitudes, "spectral_peaks")
    nyquist = sample_rate / 2.0
    if max_frequency is None or max_frequency > nyquist:
        max_frequency = nyquist

    with _essentia_errors("spectral_peaks"):
        algorithm = _algorithm(
            "SpectralPeaks",
            sampleRate=float(sample_rate),
            maxPeaks=int(max_peaks),
            minFrequency=float(min_frequency),
            maxFrequency=float(max_frequency),
            magnitudeThreshold=float(magnitude_threshold),
            orderBy=order_by,
        )
        frequencies, peak_magnitudes = algorithm(spec)
    return np.asarray(frequencies), np.asarray(peak_magnitudes)


def spectral_complexity(magnitudes, sample_rate: float, magnitude_threshold: float = 0.005) -> float:
    """Number of spectral peaks above a magnitude threshold."""
    spec = _as_real(magnitudes, "spectral_complexity")
    with _essentia_errors("spectral_complexity"):
        algorithm = _algorithm(
            "SpectralComplexity",
            sampleRate=float(sample_rate),
            magnitudeThreshold=float(magnitude_threshold),
        )
        return float(algorithm(spec))


def dissonance(frequencies, magnitudes) -> float:
    """Sensory dissonance of frequency-ordered spectral peaks, in [0, 1]."""
    freqs, mags = _as_peaks(frequencies, magnitudes, "dissonance")
    with _essentia_errors("dissonance"):
        return float(_algorithm("Dissonance")(freqs, mags))


def inharmonicity(frequencies, magnitudes) -> float:
    """
    Energy-weighted deviation of peaks from the harmonic series of the first peak.

    Peaks must be ordered by frequency.
    """
    freqs, mags = _as_peaks(frequencies, magnitudes, "inharmonicity")
    with _essentia_errors("inharmonicity"):
        return float(_algorithm("Inharmonicity")(freqs, mags))


def pitch_salience(magnitudes, sample_rate: float) -> float:
    """Ratio of the highest spectral autocorrelation peak to its value at lag zero."""
    spec = _as_real(magnitudes, "pitch_salience")
    with _essentia_errors("pitch_salience"):
        return float(_algorithm("PitchSalience", sampleRate=float(sample_rate))(spec))


def entropy(values) -> float:
    """Shannon entropy (bits) of a non-negative array treated as a distribution."""
    array = _as_real(values, "entropy")
    with _essentia_errors("entropy"):
        return float(_algorithm("Entropy")(array))


def rolloff(magnitudes, sample_rate: float, cutoff: float = 0.85) -> float:
    """Frequency (Hz) below which ``cutoff`` of the spectral energy lies."""
    spec = _as_real(magnitudes, "rolloff")
    with _essentia_errors("rolloff"):
        algorithm = _algorithm("RollOff", cutoff=float(cutoff), sampleRate=float(sample_rate))
        return float(algorithm(spec))


def loudness(frame) -> float:
    """Stevens' power law loudness: energy ** 0.67."""
    samples = _as_real(frame, "loudness")
    with _essentia_errors("loudness"):
        return float(_algorithm("Loudness")(samples))


def zero_crossing_rate(frame) -> float:
    """Fraction of samples at which the signal changes sign."""
    samples = _as_real(frame, "zero_crossing_rate")
    with _essentia_errors("zero_crossing_rate"):
        return float(_algorithm("ZeroCrossingRate")(samples))


def flux(previous, current) -> float:
    """L2 distance between two consecutive magnitude spectra."""
    prev = _as_real(previous, "flux")
    curr = _as_real(current, "flux")
    if prev.size != curr.size:
        raise ComputationError("flux: spectra differ in size")

    # Flux remembers the last spectrum it saw, so each pair gets its own instance
    with _essentia_errors("flux"):
        algorithm = _standard().Flux()
        algorithm(prev)
        return float(algorithm(curr))


def flatness(magnitudes) -> float:
    """Spectral flatness: geometric mean over arithmetic mean."""
    spec = _as_real(magnitudes, "flatness")
    with _essentia_errors("flatness"):
        return float(_algorithm("Flatness")(spec))


def band_energies(magnitudes, split_ratio: float = 0.1) -> tuple[float, float]:
    """
    Mean squared magnitude below and above a split bin.

    The split index is ``floor(split_ratio * len(spectrum))``.

    Raises:
        ComputationError: If either band is empty
    """
    spec = _as_real(magnitudes, "band_energies").astype(np.float64)
    split = int(math.floor(split_ratio * spec.size))
    low = spec[:split]
    high = spec[split:]
    if low.size == 0 or high.size == 0:
        raise ComputationError(f"band_energies: empty band at split index {split}")
    return float(np.mean(low ** 2)), float(np.mean(high ** 2))


def dynamic_complexity(audio, sample_rate: float, frame_seconds: float = 0.2) -> float:
    """
    Dynamic complexity (dB) of a whole recording.

    Args:
        audio: Entire mono recording
        sample_rate: Sample rate
        frame_seconds: Loudness frame length in seconds

    Returns:
        Average absolute deviation of short-term loudness from its mean

    Raises:
        ComputationError: If the recording is shorter than one loudness frame
    """
    samples = _as_real(audio, "dynamic_complexity")
    if sample_rate <= 0:
        raise ComputationError(f"dynamic_complexity: invalid sample rate {sample_rate}")
    if samples.size < int(round(frame_seconds * sample_rate)):
        raise ComputationError("dynamic_complexity: audio is shorter than one loudness frame")

    with _essentia_errors("dynamic_complexity"):
        algorithm = _algorithm(
            "DynamicComplexity",
            sampleRate=float(sample_rate),
            frameSize=float(frame_seconds),
        )
        complexity, _ = algorithm(samples)
    return float(complexity)
