"""Tests for frame slicing."""

import numpy as np
import pytest

from sound_profile.framing import count_frames, frame_offsets, iter_frames


def test_offsets_for_ten_thousand_samples():
    """Next offset 6144 exceeds 10000 - 4096 and is excluded."""
    assert list(frame_offsets(10000, 4096, 2048)) == [0, 2048, 4096]


def test_buffer_shorter_than_frame_yields_nothing():
    assert list(frame_offsets(4095, 4096, 2048)) == []
    assert list(frame_offsets(0, 4096, 2048)) == []


def test_exact_fit_includes_last_frame():
    """A frame ending exactly at the buffer end is included."""
    assert list(frame_offsets(4096, 4096, 2048)) == [0]
    assert list(frame_offsets(6144, 4096, 2048)) == [0, 2048]


def test_offsets_are_rerunnable():
    """Each call starts a fresh sequence."""
    first = list(frame_offsets(10000, 4096, 2048))
    second = list(frame_offsets(10000, 4096, 2048))
    assert first == second


def test_count_frames_matches_offsets():
    for length in (0, 100, 4096, 5000, 10000, 44100, 123457):
        assert count_frames(length, 4096, 2048) == len(list(frame_offsets(length, 4096, 2048)))


def test_invalid_sizes_raise():
    with pytest.raises(ValueError):
        list(frame_offsets(10000, 0, 2048))
    with pytest.raises(ValueError):
        list(frame_offsets(10000, 4096, -1))


def test_iter_frames_yields_fixed_length_slices():
    audio = np.arange(10000, dtype=np.float64)
    frames = list(iter_frames(audio, 4096, 2048))

    assert [offset for offset, _ in frames] == [0, 2048, 4096]
    for offset, frame in frames:
        assert len(frame) == 4096
        assert frame[0] == offset
