from abc import ABC, abstractmethod
from typing import Any


class AbstractLLMClient(ABC):
    """Interface for inference providers serving a summarizer and a chat model."""

    name: str = "abstract"

    @abstractmethod
    async def summarize(self, text: str, *, max_length: int) -> dict[str, Any]:
        """Run the summarization model.

        Args:
            text: Text to summarize.
            max_length: Maximum output length hint for the model.

        Returns:
            dict[str, Any]: Provider response payload; read it with
            ``extract_summary`` rather than indexing it directly.

        Raises:
            RuntimeError: If the provider call fails.
        """
        ...

    @abstractmethod
    async def chat(self, messages: list[dict[str, str]]) -> str:
        """Run the chat model over a list of ``{"role", "content"}`` messages.

        Returns:
            str: The assistant's reply text.

        Raises:
            RuntimeError: If the provider call fails or returns no text.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources held by the client."""
        return None
