"""
Gemini REST client for text generation, direct or through a relay.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

import requests

from ...config import (
    API_KEY_PREFIX, API_PROXY_BASE, ERROR_BODY_LIMIT, GEMINI_API_BASE,
    GEMINI_MODEL, LLM_TIMEOUT, PROXY_PATH,
)
from ...errors import RemoteStatusError, TransportError, UnrecognizedResponseError

logger = logging.getLogger("llm_client")


class Route(str, Enum):
    """Where generation requests are sent."""
    DIRECT = "direct"
    RELAY = "relay"


class ResponseShape(str, Enum):
    """Known response envelopes."""
    CANDIDATES = "candidates"  # Gemini API: candidates[0].content.parts[0].text
    TEXT = "text"              # relay: {"text": ...}
    RESPONSE = "response"      # relay: {"response": ...}


@dataclass(frozen=True)
class GeneratedText:
    """Text extracted from a response, tagged with the envelope it came in."""
    shape: ResponseShape
    text: str


def _match_candidates(data: Dict[str, Any]) -> Optional[str]:
    cands = data.get("candidates")
    if not isinstance(cands, list) or not cands or not isinstance(cands[0], dict):
        return None
    content = cands[0].get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) and text else None


def _match_key(key: str) -> Callable[[Dict[str, Any]], Optional[str]]:
    def match(data: Dict[str, Any]) -> Optional[str]:
        value = data.get(key)
        return value if isinstance(value, str) and value else None
    return match


# Tried in order; the first match wins
RESPONSE_MATCHERS: Tuple[Tuple[ResponseShape, Callable[[Dict[str, Any]], Optional[str]]], ...] = (
    (ResponseShape.CANDIDATES, _match_candidates),
    (ResponseShape.TEXT, _match_key("text")),
    (ResponseShape.RESPONSE, _match_key("response")),
)


def decode_response(data: Any) -> GeneratedText:
    """
    Decode a response envelope into generated text.

    Raises:
        UnrecognizedResponseError: If no known shape matches
    """
    if isinstance(data, dict):
        for shape, match in RESPONSE_MATCHERS:
            text = match(data)
            if text is not None:
                return GeneratedText(shape=shape, text=text)
    raise UnrecognizedResponseError("No analysis results received from Gemini")


def is_plausible_api_key(api_key: Optional[str]) -> bool:
    """Whether a key looks like a Google API key."""
    return bool(api_key) and api_key.startswith(API_KEY_PREFIX)


class GeminiRestClient:
    """REST-based client for Gemini models."""

    def __init__(self,
                 model: str = GEMINI_MODEL,
                 api_key: Optional[str] = None,
                 proxy_base: str = API_PROXY_BASE,
                 timeout: float = LLM_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.model = model
        self.api_key = api_key
        self.proxy_url = f"{proxy_base.rstrip('/')}/{PROXY_PATH}"
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def route(self) -> Route:
        """Direct when a plausible key is configured, otherwise the relay."""
        return Route.DIRECT if is_plausible_api_key(self.api_key) else Route.RELAY

    def is_configured(self) -> bool:
        """The relay needs no client-side credential, so this always holds."""
        return True

    def _build_request(self, prompt_text: str) -> Tuple[str, Dict[str, Any], Dict[str, str]]:
        """Return (url, json body, query params) for the active route."""
        if self.route is Route.DIRECT:
            url = f"{GEMINI_API_BASE}/models/{self.model}:generateContent"
            body = {"contents": [{"parts": [{"text": prompt_text}]}]}
            return url, body, {"key": self.api_key}
        return self.proxy_url, {"model": self.model, "input": prompt_text}, {}

    def generate(self, prompt_text: str) -> GeneratedText:
        """
        Send a prompt and return the generated text.

        Raises:
            TransportError: If no HTTP response was received
            RemoteStatusError: If the status is not a success
            UnrecognizedResponseError: If the body matches no known envelope
        """
        url, body, params = self._build_request(prompt_text)
        headers = {"Content-Type": "application/json"}

        try:
            resp = self.session.post(url, headers=headers, params=params or None,
                                     json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Gemini request failed: %s", e)
            raise TransportError(f"Gemini request failed: {e}") from e

        if not resp.ok:
            error_text = (resp.text or "")[:ERROR_BODY_LIMIT]
            logger.error("Gemini returned %s: %s", resp.status_code, error_text)
            raise RemoteStatusError(resp.status_code, error_text)

        try:
            data = resp.json()
        except ValueError as e:
            raise UnrecognizedResponseError(f"Gemini response is not JSON: {e}") from e

        generated = decode_response(data)
        logger.debug("Decoded %s envelope (%d chars)", generated.shape.value, len(generated.text))
        return generated
