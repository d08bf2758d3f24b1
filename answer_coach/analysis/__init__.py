"""Answer analysis components.

This module contains the business logic for grading interview answers:
the remote AI analysis, the heuristic fallback and the orchestrator that
chooses between them.
"""

# Orchestrator
from .orchestrator import FeedbackOrchestrator, AttemptResult, build_orchestrator

# Producers
from .remote import RemoteAnalysisClient
from .heuristics import HeuristicScorer

# Report schema
from .schemas import (
    FeedbackReport, FeedbackBlock, Scores, KeyPoints, TimeManagement,
    strip_code_fences, parse_report_payload, parse_feedback_report,
)

# Prompts
from .prompts import AnalysisPrompts

__all__ = [
    # Orchestrator
    "FeedbackOrchestrator", "AttemptResult", "build_orchestrator",

    # Producers
    "RemoteAnalysisClient", "HeuristicScorer",

    # Schema
    "FeedbackReport", "FeedbackBlock", "Scores", "KeyPoints", "TimeManagement",
    "strip_code_fences", "parse_report_payload", "parse_feedback_report",

    # Prompts
    "AnalysisPrompts",
]
