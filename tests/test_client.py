import pytest
import requests

from answer_coach.analysis.testing import FakeResponse, MockLLMClient, candidates_envelope
from answer_coach.errors import RemoteStatusError, TransportError, UnrecognizedResponseError
from answer_coach.infrastructure.llm.client import (
    GeminiRestClient, ResponseShape, Route, decode_response,
)


def test_relay_route_without_key():
    client = MockLLMClient([FakeResponse(payload={"text": "hi"})])
    assert client.route is Route.RELAY
    result = client.generate("prompt")
    sent = client.request_history[0]
    assert sent["url"] == "/api/gemini-proxy"
    assert sent["json"] == {"model": "gemini-test", "input": "prompt"}
    assert sent["params"] is None
    assert result.shape is ResponseShape.TEXT


def test_implausible_key_uses_relay():
    client = MockLLMClient([], api_key="sk-not-google")
    assert client.route is Route.RELAY


def test_direct_route_with_google_key():
    client = MockLLMClient([FakeResponse(payload=candidates_envelope("ok"))], api_key="AIzaTestKey")
    assert client.route is Route.DIRECT
    result = client.generate("prompt")
    sent = client.request_history[0]
    assert sent["url"].endswith("/models/gemini-test:generateContent")
    assert sent["params"] == {"key": "AIzaTestKey"}
    assert sent["json"] == {"contents": [{"parts": [{"text": "prompt"}]}]}
    assert sent["timeout"] == 5.0
    assert result.shape is ResponseShape.CANDIDATES
    assert result.text == "ok"


def test_proxy_base_trailing_slash():
    client = GeminiRestClient(proxy_base="https://relay.example.com/api/")
    assert client.proxy_url == "https://relay.example.com/api/gemini-proxy"
    assert client.is_configured()


@pytest.mark.parametrize("payload,shape,text", [
    (candidates_envelope("from gemini"), ResponseShape.CANDIDATES, "from gemini"),
    ({"text": "from relay"}, ResponseShape.TEXT, "from relay"),
    ({"response": "from relay b"}, ResponseShape.RESPONSE, "from relay b"),
])
def test_decode_known_shapes(payload, shape, text):
    decoded = decode_response(payload)
    assert decoded.shape is shape
    assert decoded.text == text


def test_decode_prefers_candidates_over_text():
    payload = {**candidates_envelope("first"), "text": "second"}
    assert decode_response(payload).shape is ResponseShape.CANDIDATES


def test_decode_skips_empty_candidates():
    payload = {"candidates": [], "response": "fallback"}
    assert decode_response(payload).shape is ResponseShape.RESPONSE


@pytest.mark.parametrize("payload", [
    {},
    {"error": "quota"},
    {"candidates": [{"content": {"parts": []}}]},
    {"text": ""},
    {"text": 42},
    [],
    "plain",
])
def test_decode_unknown_shapes(payload):
    with pytest.raises(UnrecognizedResponseError):
        decode_response(payload)


def test_http_error_carries_truncated_body():
    body = "x" * 500
    client = MockLLMClient([FakeResponse(status_code=500, text=body)])
    with pytest.raises(RemoteStatusError) as info:
        client.generate("prompt")
    assert info.value.status_code == 500
    assert info.value.body == "x" * 100
    assert "500" in str(info.value)


def test_transport_failure_is_wrapped():
    client = MockLLMClient([requests.Timeout("read timed out")])
    with pytest.raises(TransportError):
        client.generate("prompt")


def test_non_json_body():
    client = MockLLMClient([FakeResponse(status_code=200, text="<html>oops</html>")])
    with pytest.raises(UnrecognizedResponseError):
        client.generate("prompt")
