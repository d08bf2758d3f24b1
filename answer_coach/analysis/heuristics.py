"""
Rule-based scoring used when AI analysis is unavailable.

The scorer only looks at voice presence and answer length. Its reports say
plainly that no real assessment took place, so the user is never misled
into reading them as a full analysis.
"""
import logging
from typing import List

from ..config import GOOD_EFFICIENCY_SECONDS, HEURISTIC_PROCESSING_MS, SHORT_RESPONSE_SECONDS
from ..infrastructure.audio.metrics import count_words, metrics_from_transcript
from ..models import AudioMetrics, QuickFeedback
from .schemas import FeedbackBlock, FeedbackReport, KeyPoints, Scores, TimeManagement

logger = logging.getLogger("heuristics")

NO_VOICE_TRANSCRIPT = "[No voice detected]"
MISSING_TRANSCRIPT = "[Voice detected but transcript unavailable]"

NO_VOICE_FEEDBACK = (
    "We could not detect any voice in your recording. "
    "Please ensure your microphone is working and speak clearly."
)
CAPTURED_FEEDBACK = (
    "Your response has been captured. For a full AI-powered analysis with strengths "
    "and weaknesses, please ensure you have a stable connection and provide a detailed answer."
)

VOICE_SCORES = dict(clarity=60, relevance=50, structure=40, completeness=30, confidence=50)
SILENT_SCORES = dict(clarity=0, relevance=0, structure=0, completeness=0, confidence=0)


class HeuristicScorer:
    """Deterministic fallback producer of feedback reports."""

    def score(self, metrics: AudioMetrics) -> FeedbackReport:
        """Build a report from metrics alone. Total over all inputs."""
        has_voice = metrics.has_voice
        is_short = metrics.duration < SHORT_RESPONSE_SECONDS
        duration = max(0.0, metrics.duration)

        if not has_voice:
            overall = 0
            weaknesses = ["No voice detected"]
            suggestions = ["Check microphone settings"]
        else:
            overall = 20 if is_short else 50
            weaknesses = ["Response is very short"] if is_short else ["AI analysis temporarily unavailable"]
            suggestions = ["Try recording a longer, more detailed response"]

        if metrics.transcript:
            transcript = metrics.transcript
        else:
            transcript = MISSING_TRANSCRIPT if has_voice else NO_VOICE_TRANSCRIPT

        logger.info("Heuristic report: voice=%s short=%s overall=%d", has_voice, is_short, overall)

        return FeedbackReport(
            overall_score=overall,
            transcript=transcript,
            feedback=FeedbackBlock(
                strengths=["Audio captured successfully"] if has_voice else [],
                weaknesses=weaknesses,
                suggestions=suggestions,
                detailed_feedback=CAPTURED_FEEDBACK if has_voice else NO_VOICE_FEEDBACK,
            ),
            scores=Scores(**(VOICE_SCORES if has_voice else SILENT_SCORES)),
            key_points=KeyPoints(covered=[], missed=[]),
            time_management=TimeManagement(
                duration=duration,
                efficiency="good" if duration > GOOD_EFFICIENCY_SECONDS else "average",
                pacing="Pacing detected" if has_voice else "N/A",
            ),
            processing_time=HEURISTIC_PROCESSING_MS,
        )

    def score_transcript(self, transcript: str, duration: float) -> FeedbackReport:
        """Transcript-only fallback: voice presence is decided by word count."""
        return self.score(metrics_from_transcript(transcript, duration))

    def quick_feedback(self, transcript: str, duration: float) -> QuickFeedback:
        """Instant numbers for the UI while the full analysis runs."""
        word_count = count_words(transcript)
        wpm = round(word_count / duration * 60) if duration > 0 else 0
        estimated = min(max(round(word_count / 100 * 80 + 20), 20), 95)
        return QuickFeedback(
            word_count=word_count,
            duration=duration,
            words_per_minute=wpm,
            estimated_score=estimated,
            quick_tips=self._quick_tips(word_count, duration),
        )

    def _quick_tips(self, word_count: int, duration: float) -> List[str]:
        tips = []
        if 0 < duration < 30:
            tips.append("Aim for a longer response")
        if 0 < word_count < 50:
            tips.append("Add more specific examples")
        return tips
