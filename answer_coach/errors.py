"""
Error types raised by the analysis core.

Every remote failure is an ``AnalysisError``; the orchestrator turns these
into a heuristic fallback instead of letting them reach the caller.
"""
from typing import Optional


class ConfigurationError(ValueError):
    """Invalid configuration value."""


class AnalysisError(RuntimeError):
    """Base class for recoverable remote analysis failures."""


class TransportError(AnalysisError):
    """The request never produced an HTTP response."""


class RemoteStatusError(AnalysisError):
    """The endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Gemini API error ({status_code}): {body}")


class UnrecognizedResponseError(AnalysisError):
    """The response envelope matched none of the known shapes."""


class MalformedReportError(AnalysisError):
    """The generated text could not be parsed into a feedback report."""

    def __init__(self, message: str, raw_text: Optional[str] = None):
        self.raw_text = raw_text
        super().__init__(message)
