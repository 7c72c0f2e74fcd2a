"""Shared fixtures for sound profile tests."""

import wave
from pathlib import Path

import numpy as np
import pytest

SAMPLE_RATE = 44100


@pytest.fixture
def sample_rate() -> int:
    return SAMPLE_RATE


@pytest.fixture
def make_sine():
    """Factory for sine waves: make_sine(freq, seconds, amplitude=0.5, sr=44100)."""

    def _make(freq: float, seconds: float, amplitude: float = 0.5, sr: int = SAMPLE_RATE) -> np.ndarray:
        t = np.arange(int(seconds * sr)) / sr
        return amplitude * np.sin(2 * np.pi * freq * t)

    return _make


@pytest.fixture
def noise() -> np.ndarray:
    """One second of seeded white noise."""
    rng = np.random.default_rng(0)
    return rng.uniform(-0.5, 0.5, SAMPLE_RATE)


@pytest.fixture
def write_wav(tmp_path: Path):
    """Factory writing 16-bit PCM WAV files into tmp_path."""

    def _write(samples: np.ndarray, name: str = "song.wav", sr: int = SAMPLE_RATE) -> Path:
        samples = np.asarray(samples, dtype=np.float64)
        channels = 1 if samples.ndim == 1 else samples.shape[1]
        pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype("<i2")
        path = tmp_path / name
        with wave.open(str(path), "wb") as wav_file:
            wav_file.setnchannels(channels)
            wav_file.setsampwidth(2)
            wav_file.setframerate(sr)
            wav_file.writeframes(pcm.tobytes())
        return path

    return _write
