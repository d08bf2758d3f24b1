"""
Answer Coach Configuration
==========================

This file contains ALL configuration for the answer analysis core.
- User settings at the top (things users might want to change)
- Internal constants at the bottom (technical defaults)
"""
import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


# =============================================================================
# USER SETTINGS - Override these through environment variables
# =============================================================================

# Relay that holds the Gemini key server-side
API_PROXY_BASE = "/api"
PROXY_PATH = "gemini-proxy"

# Remote model
GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_API_KEY = None  # Optional: direct access, otherwise the relay is used
LLM_TIMEOUT = 30.0

# Logging
LOG_FILE = "./_answer_coach/analysis.log"
LOG_LEVEL = "INFO"


# =============================================================================
# INTERNAL CONSTANTS - Don't change these unless you know what you're doing
# =============================================================================

# Direct Gemini endpoint
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
API_KEY_PREFIX = "AIza"
ERROR_BODY_LIMIT = 100

# Signal presence (empirical, tuned on browser recordings)
MIN_AUDIO_BYTES = 2000
MIN_BYTES_PER_SECOND = 300.0
MIN_PEAK_RMS = 0.015
MIN_MEAN_RMS = 0.008

# Level statistics
LEVEL_FRAME_MS = 30

# Heuristic scoring
SHORT_RESPONSE_SECONDS = 10.0
GOOD_EFFICIENCY_SECONDS = 45.0
HEURISTIC_PROCESSING_MS = 100


# =============================================================================
# MAIN CONFIG OBJECT
# =============================================================================

@dataclass
class SignalThresholds:
    """Thresholds deciding whether a recording carries a real audio signal."""
    min_bytes: int = MIN_AUDIO_BYTES
    min_bytes_per_second: float = MIN_BYTES_PER_SECOND
    min_peak_rms: float = MIN_PEAK_RMS
    min_mean_rms: float = MIN_MEAN_RMS


@dataclass
class Config:
    """Main configuration object."""
    api_proxy_base: str = API_PROXY_BASE
    model_name: str = GEMINI_MODEL
    api_key: Optional[str] = GEMINI_API_KEY
    llm_timeout: float = LLM_TIMEOUT
    log_file: str = LOG_FILE
    log_level: str = LOG_LEVEL

    @property
    def proxy_url(self) -> str:
        """Full URL of the relay endpoint."""
        return f"{self.api_proxy_base.rstrip('/')}/{PROXY_PATH}"


def get_config() -> Config:
    """Load configuration from the environment."""
    timeout_raw = os.getenv("LLM_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else LLM_TIMEOUT
    except ValueError:
        raise ConfigurationError(f"LLM_TIMEOUT must be a number, got {timeout_raw!r}")
    if timeout <= 0:
        raise ConfigurationError("LLM_TIMEOUT must be positive")

    api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_SPEECH_API_KEY") or GEMINI_API_KEY

    return Config(
        api_proxy_base=os.getenv("API_PROXY_BASE") or API_PROXY_BASE,
        model_name=os.getenv("GEMINI_MODEL") or GEMINI_MODEL,
        api_key=api_key,
        llm_timeout=timeout,
        log_file=os.getenv("ANSWER_COACH_LOG_FILE") or LOG_FILE,
        log_level=os.getenv("ANSWER_COACH_LOG_LEVEL") or LOG_LEVEL,
    )
