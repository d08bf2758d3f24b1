"""
Structured feedback report schema and parsing of model output.
"""
import json
import math
import re
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..errors import MalformedReportError


Efficiency = Literal["excellent", "good", "average", "poor"]

_FENCE_OPEN_JSON = re.compile(r"^```json\n?")
_FENCE_OPEN = re.compile(r"^```\n?")
_FENCE_CLOSE = re.compile(r"\n?```$")


def round_score(value: Any) -> Any:
    """Round fractional numbers, rejecting infinities and NaN."""
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"score must be a finite number, got {value}")
        return round(value)
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite constant {name} is not valid JSON")


class ReportModel(BaseModel):
    """Base model accepting both camelCase wire names and field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FeedbackBlock(ReportModel):
    strengths: List[str]
    weaknesses: List[str]
    suggestions: List[str]
    detailed_feedback: str


class Scores(ReportModel):
    clarity: int = Field(ge=0, le=100)
    relevance: int = Field(ge=0, le=100)
    structure: int = Field(ge=0, le=100)
    completeness: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)

    @field_validator("*", mode="before")
    @classmethod
    def round_fractional_scores(cls, value: Any) -> Any:
        return round_score(value)


class KeyPoints(ReportModel):
    covered: List[str]
    missed: List[str]


class TimeManagement(ReportModel):
    duration: float = Field(ge=0)
    efficiency: Efficiency
    pacing: str


class FeedbackReport(ReportModel):
    """The sole output of the analysis core. Every field is required."""
    overall_score: int = Field(ge=0, le=100)
    transcript: str
    feedback: FeedbackBlock
    scores: Scores
    key_points: KeyPoints
    time_management: TimeManagement
    processing_time: int = Field(ge=0)

    @field_validator("overall_score", "processing_time", mode="before")
    @classmethod
    def round_fractional_values(cls, value: Any) -> Any:
        return round_score(value)

    def to_dict(self) -> Dict[str, Any]:
        """Wire form with camelCase keys."""
        return self.model_dump(by_alias=True)


def strip_code_fences(text: str) -> str:
    """Remove an optional surrounding ```json ... ``` or ``` ... ``` fence."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN_JSON.sub("", cleaned))
    elif cleaned.startswith("```"):
        cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", cleaned))
    return cleaned


def parse_report_payload(raw_text: str) -> Dict[str, Any]:
    """
    Parse generated text into a JSON object.

    Raises:
        MalformedReportError: If the text is not a JSON object
    """
    cleaned = strip_code_fences(raw_text)
    try:
        data = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedReportError(f"Generated text is not valid JSON: {e}", raw_text) from e

    if not isinstance(data, dict):
        raise MalformedReportError(f"Expected a JSON object, got {type(data).__name__}", raw_text)
    return data


def parse_feedback_report(data: Dict[str, Any]) -> FeedbackReport:
    """
    Validate a fully assembled payload into a report.

    Raises:
        MalformedReportError: If any field is missing or out of range
    """
    try:
        return FeedbackReport.model_validate(data)
    except ValidationError as e:
        raise MalformedReportError(f"Invalid feedback report structure: {e}") from e
