"""Frame slicing over a sample buffer."""

from typing import Iterator, Sequence

import numpy as np


def frame_offsets(length: int, frame_size: int, hop_size: int) -> Iterator[int]:
    """
    Yield frame start offsets ``0, hop, 2*hop, ...`` while a full frame fits.

    Args:
        length: Number of samples in the buffer
        frame_size: Samples per frame
        hop_size: Stride between frame starts

    Yields:
        Start offset of each frame
    """
    if frame_size <= 0 or hop_size <= 0:
        raise ValueError(f"frame_size and hop_size must be positive, got {frame_size}/{hop_size}")

    offset = 0
    while offset <= length - frame_size:
        yield offset
        offset += hop_size


def count_frames(length: int, frame_size: int, hop_size: int) -> int:
    """Number of frames ``frame_offsets`` yields for a buffer."""
    if frame_size <= 0 or hop_size <= 0:
        raise ValueError(f"frame_size and hop_size must be positive, got {frame_size}/{hop_size}")
    if length < frame_size:
        return 0
    return (length - frame_size) // hop_size + 1


def iter_frames(
    audio: Sequence[float],
    frame_size: int,
    hop_size: int,
) -> Iterator[tuple[int, np.ndarray]]:
    """Yield ``(offset, frame)`` pairs; frames are views into ``audio``."""
    samples = np.asarray(audio)
    for offset in frame_offsets(len(samples), frame_size, hop_size):
        yield offset, samples[offset : offset + frame_size]
