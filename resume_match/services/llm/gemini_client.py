"""LLMClientInterface implemented on the google-generativeai SDK."""

import threading
from typing import Any, Dict, List, Optional

import google.generativeai as genai

from resume_match.config.logging_config import get_logger

from .llm_client_interface import ContentPart, LLMClientInterface

logger = get_logger(__name__)


class GeminiClient(LLMClientInterface):
    """Calls a Gemini model through ``generate_content_async``.

    Each thread gets its own ``GenerativeModel``: Streamlit callbacks run
    ``asyncio.run`` on the script thread, and a model created under one event
    loop must not be awaited from another.
    """

    def __init__(self, api_key: str, model_name: str):
        if not api_key:
            raise ValueError("API key cannot be empty")
        if not model_name:
            raise ValueError("Model name cannot be empty")

        self._api_key = api_key
        self._model_name = model_name
        self._thread_local = threading.local()

    def _get_thread_local_model(self) -> genai.GenerativeModel:
        model = getattr(self._thread_local, "model", None)
        if model is None:
            genai.configure(api_key=self._api_key)
            model = genai.GenerativeModel(self._model_name)
            self._thread_local.model = model
            logger.debug(
                "Created %s model handle on thread %s",
                self._model_name,
                threading.current_thread().name,
            )
        return model

    async def generate_content(
        self,
        contents: List[ContentPart],
        generation_config: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> Any:
        """Issue one ``generate_content_async`` call.

        SDK exceptions (auth, quota, network, blocked prompt) are not caught
        here and reach the caller as raised.
        """
        if not contents:
            raise ValueError("Contents cannot be empty")

        if generation_config is not None:
            kwargs["generation_config"] = generation_config
        model = self._get_thread_local_model()
        return await model.generate_content_async(contents, **kwargs)

    def get_model_name(self) -> str:
        return self._model_name

    def is_initialized(self) -> bool:
        return bool(self._api_key and self._model_name)

    def reconfigure(self, api_key: str) -> None:
        """Use a new API key; cached model handles are dropped."""
        if not api_key:
            raise ValueError("API key cannot be empty")

        self._api_key = api_key
        genai.configure(api_key=api_key)
        self._thread_local = threading.local()
