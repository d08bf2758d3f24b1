"""
Audio-side analysis helpers.

- processing: level statistics from PCM samples and WAV files
- metrics: voice presence and word counts for a recording
"""

from .processing import level_stats_from_samples, read_wav_recording
from .metrics import MetricsExtractor, count_words, metrics_from_transcript

__all__ = [
    "level_stats_from_samples",
    "read_wav_recording",
    "MetricsExtractor",
    "count_words",
    "metrics_from_transcript",
]
