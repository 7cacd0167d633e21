"""The seam between the analysis service and a concrete LLM SDK."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

ContentPart = Union[str, Dict[str, Any]]


class LLMClientInterface(ABC):
    """One multimodal generation call against a hosted model.

    Implementations own the SDK handle and credentials. Callers only build
    the ordered list of parts and read the provider's response back.
    """

    @abstractmethod
    async def generate_content(
        self,
        contents: List[ContentPart],
        generation_config: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> Any:
        """Send one request and return the provider response unchanged.

        Args:
            contents: Request parts in order. Strings are text parts and
                ``{"mime_type": str, "data": bytes}`` dicts are inline files.
            generation_config: Provider settings such as the response MIME
                type and response schema
            **kwargs: Passed through to the provider SDK

        Raises:
            ValueError: If ``contents`` is empty
        """
        raise NotImplementedError

    @abstractmethod
    def get_model_name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def is_initialized(self) -> bool:
        """Whether credentials and a model name are present."""
        raise NotImplementedError

    @abstractmethod
    def reconfigure(self, api_key: str) -> None:
        """Swap the API key used for subsequent requests."""
        raise NotImplementedError
