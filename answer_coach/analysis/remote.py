"""
AI analysis of a single answer through the remote model.
"""
import logging
import time
from typing import Callable

from ..errors import MalformedReportError
from ..infrastructure.llm import GeminiRestClient
from ..models import AnalysisRequest
from .prompts import AnalysisPrompts
from .schemas import FeedbackReport, parse_feedback_report, parse_report_payload

logger = logging.getLogger("remote_analysis")


class RemoteAnalysisClient:
    """Builds the analysis prompt, calls the model and parses its report."""

    def __init__(self, llm_client: GeminiRestClient, clock: Callable[[], float] = time.monotonic):
        self.llm_client = llm_client
        self.clock = clock

    @property
    def model(self) -> str:
        return self.llm_client.model

    def build_prompt(self, request: AnalysisRequest) -> str:
        return AnalysisPrompts.answer_analysis(
            request.question,
            request.transcript,
            request.audio_duration,
            request.transcription_confidence,
        )

    def analyze(self, request: AnalysisRequest) -> FeedbackReport:
        """
        Analyze an answer with the remote model.

        Args:
            request: Answer and question to analyze

        Returns:
            FeedbackReport with the request's own transcript and duration

        Raises:
            AnalysisError: On any transport, envelope or parsing failure
        """
        start = self.clock()
        prompt = self.build_prompt(request)

        logger.info(
            "Starting Gemini analysis: model=%s type=%s transcript_chars=%d duration=%.1fs route=%s",
            self.model, request.question.type, len(request.transcript),
            request.audio_duration, self.llm_client.route.value,
        )

        generated = self.llm_client.generate(prompt)
        logger.debug("Raw model output (%s): %r", generated.shape.value, generated.text)

        payload = parse_report_payload(generated.text)

        # The model's restated transcript and duration are not trusted
        time_management = payload.get("timeManagement")
        if not isinstance(time_management, dict):
            raise MalformedReportError("Report is missing timeManagement", generated.text)

        processing_ms = int(round((self.clock() - start) * 1000))
        payload.update(
            transcript=request.transcript,
            timeManagement={**time_management, "duration": max(0.0, request.audio_duration)},
            processingTime=processing_ms,
        )
        report = parse_feedback_report(payload)

        logger.info("Gemini analysis complete: overall=%d in %dms", report.overall_score, processing_ms)
        return report
