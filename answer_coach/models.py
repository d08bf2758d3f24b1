"""
Data models for the analysis core.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class LevelStats:
    """Per-frame RMS levels accumulated while recording."""
    max_rms: float = 0.0
    sum_rms: float = 0.0
    frames: int = 0


@dataclass(frozen=True)
class RecordingStats:
    """Raw statistics of a captured answer."""
    duration: float
    audio_size: int
    transcript: str
    levels: LevelStats = field(default_factory=LevelStats)


@dataclass(frozen=True)
class AudioMetrics:
    """Audio quality and voice-activity summary derived from a recording."""
    duration: float
    has_voice: bool
    transcript: str
    word_count: int
    avg_rms: float
    max_rms: float


@dataclass
class InterviewQuestion:
    """Question the candidate is answering."""
    id: str
    question: str
    type: str = "behavioral"
    difficulty: str = "medium"
    skills: List[str] = field(default_factory=list)
    expected_duration: int = 120
    category: str = "general"


@dataclass
class AnalysisRequest:
    """Everything the orchestrator needs to produce one feedback report."""
    transcript: str
    question: InterviewQuestion
    audio_duration: float
    transcription_confidence: float = 1.0
    audio_size: Optional[int] = None
    levels: Optional[LevelStats] = None

    @property
    def has_recording_stats(self) -> bool:
        """Whether raw audio statistics were supplied."""
        return self.audio_size is not None and self.levels is not None


@dataclass(frozen=True)
class QuickFeedback:
    """Instant metrics shown while the full analysis is running."""
    word_count: int
    duration: float
    words_per_minute: int
    estimated_score: int
    quick_tips: List[str] = field(default_factory=list)
