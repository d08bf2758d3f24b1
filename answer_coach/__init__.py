"""
Answer Coach: AI feedback for spoken interview answers.

Grades a transcribed answer with a Gemini model and falls back to a
deterministic heuristic report when the model is unavailable.
"""

__version__ = "1.0.0"

# Main entry points
from .analysis.orchestrator import FeedbackOrchestrator, build_orchestrator
from .analysis.schemas import FeedbackReport
from .models import AnalysisRequest, InterviewQuestion, LevelStats

__all__ = [
    "FeedbackOrchestrator", "build_orchestrator", "FeedbackReport",
    "AnalysisRequest", "InterviewQuestion", "LevelStats",
]
