"""Tests for WAV loading."""

import numpy as np
import pytest

from sound_profile.utils import AudioLoader, AudioLoadError


def test_missing_file(tmp_path):
    with pytest.raises(AudioLoadError, match="File not found"):
        AudioLoader().load(tmp_path / "missing.wav")


def test_unsupported_extension(tmp_path):
    path = tmp_path / "song.mp3"
    path.write_bytes(b"ID3")
    with pytest.raises(AudioLoadError, match="Unsupported format"):
        AudioLoader().load(path)


def test_malformed_wav(tmp_path):
    path = tmp_path / "broken.wav"
    path.write_bytes(b"RIFF\x00\x00\x00\x00not really a wav file")
    with pytest.raises(AudioLoadError):
        AudioLoader().load(path)


def test_empty_wav(write_wav):
    path = write_wav(np.zeros(0), name="empty.wav")
    with pytest.raises(AudioLoadError):
        AudioLoader().load(path)


def test_mono_wav(write_wav, make_sine):
    path = write_wav(make_sine(440.0, 0.5, sr=22050), sr=22050)
    audio, sr = AudioLoader().load(path)

    assert sr == 22050
    assert audio.ndim == 1
    assert len(audio) == 11025
    assert audio.dtype == np.float32
    assert np.max(np.abs(audio)) == pytest.approx(0.5, abs=1e-3)


def test_only_first_channel_is_used(write_wav):
    stereo = np.column_stack([np.full(4410, 0.5), np.full(4410, -0.5)])
    path = write_wav(stereo, name="stereo.wav")
    audio, sr = AudioLoader().load(path)

    assert sr == 44100
    assert audio.shape == (4410,)
    assert np.all(audio > 0.49)


def test_decode_bytes(write_wav, make_sine):
    path = write_wav(make_sine(440.0, 0.1))
    audio, sr = AudioLoader().decode(path.read_bytes())
    assert sr == 44100
    assert len(audio) == 4410
