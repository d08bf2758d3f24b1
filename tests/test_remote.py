import json
from itertools import count

import pytest

from answer_coach.analysis.remote import RemoteAnalysisClient
from answer_coach.analysis.testing import (
    FakeResponse, MockLLMClient, candidates_envelope, create_test_request, sample_report_payload,
)
from answer_coach.errors import (
    AnalysisError, MalformedReportError, RemoteStatusError, UnrecognizedResponseError,
)


def _fake_clock(step=0.25):
    ticks = count()
    return lambda: next(ticks) * step


def _remote(responses, **kwargs):
    return RemoteAnalysisClient(MockLLMClient(responses, **kwargs), clock=_fake_clock())


def test_prompt_embeds_question_and_answer():
    remote = _remote([])
    request = create_test_request(transcript="We shipped late but learned a lot", duration=42.0)
    prompt = remote.build_prompt(request)
    assert '"Tell me about a time you disagreed with a teammate."' in prompt
    assert "Type: behavioral" in prompt
    assert "Difficulty: medium" in prompt
    assert "Skills Evaluated: communication, conflict resolution" in prompt
    assert "Expected Duration: 120 seconds" in prompt
    assert "Category: teamwork" in prompt
    assert '"We shipped late but learned a lot"' in prompt
    assert "Actual Duration: 42 seconds" in prompt
    assert "Transcription Confidence: 92%" in prompt
    assert '"overallScore"' in prompt


def test_successful_analysis_overlays_request_values():
    payload = sample_report_payload(transcript="the model's own paraphrase")
    remote = _remote([FakeResponse(payload=candidates_envelope(json.dumps(payload)))],
                     api_key="AIzaTestKey")
    request = create_test_request(transcript="original words", duration=61.5)

    report = remote.analyze(request)

    assert report.transcript == "original words"
    assert report.time_management.duration == 61.5
    assert report.time_management.efficiency == "good"
    assert report.processing_time == 250
    assert report.overall_score == 78
    assert report.scores.relevance == 85


def test_fenced_relay_response_is_parsed():
    text = "```json\n" + json.dumps(sample_report_payload()) + "\n```"
    remote = _remote([FakeResponse(payload={"response": text})])
    report = remote.analyze(create_test_request())
    assert report.feedback.strengths[0] == "Clear STAR structure"


def test_truncated_generation_is_recoverable():
    text = json.dumps(sample_report_payload())[:120]
    remote = _remote([FakeResponse(payload={"text": text})])
    with pytest.raises(MalformedReportError):
        remote.analyze(create_test_request())


def test_missing_time_management_is_malformed():
    payload = sample_report_payload()
    del payload["timeManagement"]
    remote = _remote([FakeResponse(payload={"text": json.dumps(payload)})])
    with pytest.raises(MalformedReportError):
        remote.analyze(create_test_request())


def test_missing_scores_does_not_yield_partial_report():
    payload = sample_report_payload()
    del payload["scores"]
    remote = _remote([FakeResponse(payload={"text": json.dumps(payload)})])
    with pytest.raises(MalformedReportError):
        remote.analyze(create_test_request())


def test_unrecognized_envelope_fails():
    remote = _remote([FakeResponse(payload={"output": "something"})])
    with pytest.raises(UnrecognizedResponseError):
        remote.analyze(create_test_request())


def test_http_500_fails():
    remote = _remote([FakeResponse(status_code=500, text="Internal error " * 20)])
    with pytest.raises(RemoteStatusError) as info:
        remote.analyze(create_test_request())
    assert len(info.value.body) == 100


@pytest.mark.parametrize("constant", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_overall_score_is_malformed(constant):
    text = json.dumps(sample_report_payload()).replace('"overallScore": 78', f'"overallScore": {constant}')
    remote = _remote([FakeResponse(payload={"text": text})])
    with pytest.raises(MalformedReportError):
        remote.analyze(create_test_request())


@pytest.mark.parametrize("constant", ["Infinity", "NaN"])
def test_non_finite_sub_score_is_malformed(constant):
    text = json.dumps(sample_report_payload()).replace('"clarity": 82', f'"clarity": {constant}')
    remote = _remote([FakeResponse(payload={"text": text})])
    with pytest.raises(AnalysisError):
        remote.analyze(create_test_request())
