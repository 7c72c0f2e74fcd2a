"""Audio loading for analysis."""

import io
from pathlib import Path
from typing import Union

import numpy as np


class AudioLoadError(Exception):
    """Raised when audio loading fails."""

    pass


class AudioLoader:
    """Load the first channel of a WAV file at its native sample rate."""

    SUPPORTED_FORMATS = {".wav", ".wave"}

    def load(self, file_path: Union[str, Path]) -> tuple[np.ndarray, int]:
        """
        Load audio file and return the first channel with its sample rate.

        Args:
            file_path: Path to WAV file

        Returns:
            Tuple of (mono float32 samples, sample rate)

        Raises:
            AudioLoadError: If loading fails
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise AudioLoadError(f"File not found: {file_path}")

        if file_path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise AudioLoadError(
                f"Unsupported format: {file_path.suffix}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED_FORMATS))}"
            )

        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise AudioLoadError(f"Failed to read {file_path}: {e}") from e

        return self.decode(data, source=str(file_path))

    def decode(self, data: bytes, source: str = "<bytes>") -> tuple[np.ndarray, int]:
        """
        Decode an in-memory WAV file.

        Args:
            data: Encoded WAV bytes
            source: Name used in error messages

        Returns:
            Tuple of (mono float32 samples, sample rate)

        Raises:
            AudioLoadError: If decoding fails or the file holds no samples
        """
        import librosa

        try:
            audio, sr = librosa.load(io.BytesIO(data), sr=None, mono=False)
        except Exception as e:
            raise AudioLoadError(f"Failed to decode {source}: {e}") from e

        # Multi-channel audio comes back as (channels, samples)
        if audio.ndim > 1:
            audio = audio[0]

        if len(audio) == 0:
            raise AudioLoadError(f"Empty audio file: {source}")

        return np.ascontiguousarray(audio, dtype=np.float32), int(sr)
