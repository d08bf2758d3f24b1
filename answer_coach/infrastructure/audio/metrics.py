"""
Audio metrics extraction: word count, mean/peak levels and voice presence.
"""
import logging
from typing import Optional

from ...models import AudioMetrics, LevelStats, RecordingStats
from ...config import SignalThresholds

logger = logging.getLogger("audio_metrics")


def count_words(transcript: str) -> int:
    """Number of whitespace-delimited non-empty tokens."""
    return len(transcript.split())


class MetricsExtractor:
    """Derives AudioMetrics from raw recording statistics."""

    def __init__(self, thresholds: Optional[SignalThresholds] = None):
        self.thresholds = thresholds or SignalThresholds()

    def has_audio_signal(self, audio_size: int, duration: float, levels: LevelStats) -> bool:
        """Byte-rate and level check for a real signal, independent of the transcript."""
        t = self.thresholds
        bytes_per_second = audio_size / duration if duration > 0 else 0.0
        avg_rms = levels.sum_rms / levels.frames if levels.frames > 0 else 0.0
        return (
            duration > 0
            and audio_size >= t.min_bytes
            and bytes_per_second >= t.min_bytes_per_second
            and (levels.max_rms >= t.min_peak_rms or avg_rms >= t.min_mean_rms)
        )

    def extract(self, stats: RecordingStats) -> AudioMetrics:
        """Summarize a recording. Never fails."""
        levels = stats.levels
        word_count = count_words(stats.transcript)
        avg_rms = levels.sum_rms / levels.frames if levels.frames > 0 else 0.0
        signal = self.has_audio_signal(stats.audio_size, stats.duration, levels)

        # Any transcript counts as voice, even when the recording was quiet
        has_voice = signal or word_count > 0

        logger.debug(
            "Metrics: duration=%.2fs size=%d words=%d avg_rms=%.4f max_rms=%.4f signal=%s voice=%s",
            stats.duration, stats.audio_size, word_count, avg_rms, levels.max_rms, signal, has_voice,
        )
        return AudioMetrics(
            duration=stats.duration,
            has_voice=has_voice,
            transcript=stats.transcript,
            word_count=word_count,
            avg_rms=avg_rms,
            max_rms=levels.max_rms,
        )

    def analyze_audio_metrics(self,
                              audio_size: int,
                              duration: float,
                              transcript: str,
                              levels: LevelStats) -> AudioMetrics:
        """Convenience wrapper taking the loose values the recorder reports."""
        return self.extract(RecordingStats(
            duration=duration, audio_size=audio_size, transcript=transcript, levels=levels
        ))


def metrics_from_transcript(transcript: str, duration: float) -> AudioMetrics:
    """Minimal metrics when no recording statistics exist: voice means words."""
    word_count = count_words(transcript)
    return AudioMetrics(
        duration=duration,
        has_voice=word_count > 0,
        transcript=transcript,
        word_count=word_count,
        avg_rms=0.0,
        max_rms=0.0,
    )
