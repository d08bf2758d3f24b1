import pytest

from answer_coach.config import SignalThresholds
from answer_coach.infrastructure.audio.metrics import (
    MetricsExtractor, count_words, metrics_from_transcript,
)
from answer_coach.models import LevelStats, RecordingStats


LOUD = LevelStats(max_rms=0.2, sum_rms=10.0, frames=100)
SILENT = LevelStats(max_rms=0.0, sum_rms=0.0, frames=100)


def test_count_words_ignores_extra_whitespace():
    assert count_words("  hello   world\n\tagain ") == 3
    assert count_words("") == 0
    assert count_words("   ") == 0


def test_mean_level_is_sum_over_frames(extractor):
    metrics = extractor.analyze_audio_metrics(5000, 10.0, "", LevelStats(0.1, 2.0, 40))
    assert metrics.avg_rms == pytest.approx(0.05)
    assert metrics.max_rms == pytest.approx(0.1)


def test_mean_level_zero_without_frames(extractor):
    metrics = extractor.analyze_audio_metrics(5000, 10.0, "", LevelStats(0.1, 2.0, 0))
    assert metrics.avg_rms == 0.0


@pytest.mark.parametrize("levels", [SILENT, LOUD, LevelStats()])
@pytest.mark.parametrize("size,duration", [(0, 0.0), (500, 5.0), (100000, 30.0)])
def test_words_always_mean_voice(extractor, levels, size, duration):
    metrics = extractor.analyze_audio_metrics(size, duration, "hello there", levels)
    assert metrics.has_voice
    assert metrics.word_count == 2


@pytest.mark.parametrize("levels", [SILENT, LOUD])
@pytest.mark.parametrize("size", [0, 500, 1999])
def test_small_recording_without_words_has_no_voice(extractor, levels, size):
    metrics = extractor.analyze_audio_metrics(size, 5.0, "", levels)
    assert not metrics.has_voice


def test_loud_recording_without_transcript_has_voice(extractor):
    metrics = extractor.analyze_audio_metrics(48000, 10.0, "", LOUD)
    assert metrics.has_voice
    assert metrics.word_count == 0


def test_quiet_recording_without_transcript_has_no_voice(extractor):
    metrics = extractor.analyze_audio_metrics(48000, 10.0, "", SILENT)
    assert not metrics.has_voice


def test_low_byte_rate_is_not_a_signal(extractor):
    # 2500 bytes over 10s is 250 B/s, under the 300 B/s floor
    assert not extractor.has_audio_signal(2500, 10.0, LOUD)
    assert extractor.has_audio_signal(3000, 10.0, LOUD)


def test_mean_level_alone_can_show_signal(extractor):
    levels = LevelStats(max_rms=0.01, sum_rms=0.9, frames=100)
    assert extractor.has_audio_signal(48000, 10.0, levels)


def test_zero_duration_is_never_a_signal(extractor):
    assert not extractor.has_audio_signal(48000, 0.0, LOUD)


def test_thresholds_are_configurable():
    strict = MetricsExtractor(SignalThresholds(min_peak_rms=0.5, min_mean_rms=0.5))
    assert not strict.has_audio_signal(48000, 10.0, LOUD)


def test_extract_keeps_transcript():
    stats = RecordingStats(duration=12.0, audio_size=9000, transcript="one two", levels=LOUD)
    metrics = MetricsExtractor().extract(stats)
    assert metrics.transcript == "one two"
    assert metrics.duration == 12.0


def test_metrics_from_transcript_zeroes_levels():
    metrics = metrics_from_transcript("just a few words", 8.0)
    assert metrics.has_voice
    assert metrics.word_count == 4
    assert metrics.avg_rms == 0.0 and metrics.max_rms == 0.0
    assert not metrics_from_transcript("", 8.0).has_voice
