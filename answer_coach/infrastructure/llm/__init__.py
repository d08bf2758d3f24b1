"""Remote text-generation client."""

from .client import GeminiRestClient, GeneratedText, ResponseShape, Route

__all__ = ["GeminiRestClient", "GeneratedText", "ResponseShape", "Route"]
