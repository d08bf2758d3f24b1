"""
Basic audio processing: level statistics from PCM samples and WAV files.
"""
import os
import wave
from typing import Tuple

import numpy as np

from ...models import LevelStats
from ...config import LEVEL_FRAME_MS


def stereo_to_mono(x: np.ndarray) -> np.ndarray:
    """Convert stereo audio to mono by averaging channels."""
    return np.mean(x, axis=1)


def pcm16_to_float(pcm: np.ndarray) -> np.ndarray:
    """Scale int16 PCM to floats in [-1, 1]."""
    return pcm.astype(np.float32) / 32768.0


def level_stats_from_samples(samples: np.ndarray,
                             sample_rate: int,
                             frame_ms: int = LEVEL_FRAME_MS) -> LevelStats:
    """
    Accumulate per-frame RMS levels the way the recorder meters them.

    Args:
        samples: Mono float samples in [-1, 1]
        sample_rate: Sample rate in Hz
        frame_ms: Frame length in milliseconds

    Returns:
        LevelStats with the peak frame RMS, the sum of frame RMS values and the frame count
    """
    samples = np.asarray(samples, dtype=np.float32)
    frame_len = max(1, int(sample_rate * frame_ms / 1000))
    n_frames = len(samples) // frame_len
    if n_frames == 0:
        if len(samples) == 0:
            return LevelStats()
        rms = float(np.sqrt(np.mean(samples ** 2)))
        return LevelStats(max_rms=rms, sum_rms=rms, frames=1)

    frames = samples[:n_frames * frame_len].reshape(n_frames, frame_len)
    rms = np.sqrt(np.mean(frames ** 2, axis=1))
    return LevelStats(max_rms=float(rms.max()), sum_rms=float(rms.sum()), frames=int(n_frames))


def read_wav_recording(path: str, frame_ms: int = LEVEL_FRAME_MS) -> Tuple[int, float, LevelStats]:
    """
    Read a 16-bit PCM WAV file and summarize it.

    Returns:
        (file size in bytes, duration in seconds, level statistics)
    """
    with wave.open(path, "rb") as wf:
        if wf.getsampwidth() != 2:
            raise ValueError(f"Only 16-bit PCM WAV is supported: {path}")
        channels = wf.getnchannels()
        sample_rate = wf.getframerate()
        n_frames = wf.getnframes()
        raw = wf.readframes(n_frames)

    pcm = np.frombuffer(raw, dtype=np.int16)
    if channels > 1:
        pcm = pcm.reshape(-1, channels)
        samples = stereo_to_mono(pcm16_to_float(pcm))
    else:
        samples = pcm16_to_float(pcm)

    duration = n_frames / float(sample_rate) if sample_rate else 0.0
    return os.path.getsize(path), duration, level_stats_from_samples(samples, sample_rate, frame_ms)
