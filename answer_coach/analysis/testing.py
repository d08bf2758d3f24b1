"""
Testing infrastructure with fake transports for the analysis core.
"""
import json
from typing import Any, Dict, List, Optional, Union

import requests

from ..infrastructure.llm import GeminiRestClient
from ..models import AnalysisRequest, InterviewQuestion, LevelStats


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class FakeSession:
    """Records posted requests and replays canned responses or exceptions."""

    def __init__(self, responses: List[Union[FakeResponse, Exception]]):
        self.responses = list(responses)
        self.requests: List[Dict[str, Any]] = []

    def post(self, url: str, **kwargs) -> FakeResponse:
        self.requests.append({"url": url, **kwargs})
        if not self.responses:
            raise requests.ConnectionError("No more fake responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class MockLLMClient(GeminiRestClient):
    """GeminiRestClient backed by a FakeSession."""

    def __init__(self, responses: List[Union[FakeResponse, Exception]],
                 api_key: Optional[str] = None, model: str = "gemini-test"):
        super().__init__(model=model, api_key=api_key, proxy_base="/api",
                         timeout=5.0, session=FakeSession(responses))

    @property
    def request_history(self) -> List[Dict[str, Any]]:
        return self.session.requests


def sample_report_payload(**overrides) -> Dict[str, Any]:
    """A report as the model would return it (no transcript, no processing time)."""
    payload: Dict[str, Any] = {
        "overallScore": 78,
        "feedback": {
            "strengths": ["Clear STAR structure", "Concrete metrics", "Calm delivery"],
            "weaknesses": ["Result section was brief", "Few details on trade-offs"],
            "suggestions": ["Quantify the outcome", "Name the stakeholders", "Close with a lesson"],
            "detailedFeedback": "A well organized answer with a concrete situation. The result deserved more detail.",
        },
        "scores": {
            "clarity": 82,
            "relevance": 85,
            "structure": 80,
            "completeness": 65,
            "confidence": 75,
        },
        "keyPoints": {
            "covered": ["Situation", "Action taken"],
            "missed": ["Measurable result"],
        },
        "timeManagement": {
            "duration": 999,
            "efficiency": "good",
            "pacing": "Steady pace with brief pauses",
        },
    }
    payload.update(overrides)
    return payload


def candidates_envelope(text: str) -> Dict[str, Any]:
    """Gemini API response wrapping the given text."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def create_test_question() -> InterviewQuestion:
    return InterviewQuestion(
        id="conflict-1",
        question="Tell me about a time you disagreed with a teammate.",
        type="behavioral",
        difficulty="medium",
        skills=["communication", "conflict resolution"],
        expected_duration=120,
        category="teamwork",
    )


def create_test_request(transcript: str = "I disagreed with a teammate about our release plan",
                        duration: float = 60.0,
                        audio_size: Optional[int] = None,
                        levels: Optional[LevelStats] = None) -> AnalysisRequest:
    return AnalysisRequest(
        transcript=transcript,
        question=create_test_question(),
        audio_duration=duration,
        transcription_confidence=0.92,
        audio_size=audio_size,
        levels=levels,
    )
