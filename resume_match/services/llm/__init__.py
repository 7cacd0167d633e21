"""Provider-neutral LLM client seam and its Gemini binding."""

from .gemini_client import GeminiClient
from .llm_client_interface import LLMClientInterface

__all__ = ["GeminiClient", "LLMClientInterface"]
