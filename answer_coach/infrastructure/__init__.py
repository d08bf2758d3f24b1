"""Infrastructure components for the answer analysis core.

This module contains low-level technical components: audio metrics and the
remote text-generation client.
"""

# Audio infrastructure
from .audio import MetricsExtractor, level_stats_from_samples, read_wav_recording

# LLM infrastructure
from .llm import GeminiRestClient, GeneratedText, ResponseShape

__all__ = [
    # Audio
    "MetricsExtractor", "level_stats_from_samples", "read_wav_recording",

    # LLM client
    "GeminiRestClient", "GeneratedText", "ResponseShape",
]
