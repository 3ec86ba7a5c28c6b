"""Inference service relaying summarize/generate requests to the provider.

This service is the boundary between the HTTP layer and the inference
client. It handles:
- Input validation (non-empty after trimming) before any external call
- Building the provider request (length hint, chat message)
- Normalizing the provider response
- Converting provider failures into ``LLMAppError``

Both operations follow the same failure policy: a provider error becomes an
``LLMAppError`` whose message names the operation, and the global handler
returns it as a 500.
"""

import logging

from content_api.adapters.llm.base import AbstractLLMClient
from content_api.adapters.llm.response import extract_summary
from content_api.core.errors import LLMAppError, ValidationAppError
from content_api.schemas.content import GenerateResponse, SummarizeResponse

logger = logging.getLogger(__name__)

GENERATE_PROMPT_TEMPLATE = "Generate related content based on: {prompt}"


def require_text(value: str | None, *, field: str, message: str) -> str:
    """Return ``value`` if it has non-whitespace content.

    Args:
        value: Raw field value from the request.
        field: Field name, used as the error code suffix.
        message: Message returned to the client when the check fails.

    Raises:
        ValidationAppError: If ``value`` is None, empty or whitespace-only.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationAppError(code=f"{field}_required", message=message)
    return value


def build_generate_messages(prompt: str) -> list[dict[str, str]]:
    """Build the single user-role message sent to the chat model."""
    return [{"role": "user", "content": GENERATE_PROMPT_TEMPLATE.format(prompt=prompt)}]


class InferenceService:
    """Service wrapping the summarization and chat models.

    Attributes:
        llm: Inference client, or None when no provider is configured.
        summary_max_length: Maximum output length hint for summaries.
    """

    def __init__(self, llm: AbstractLLMClient | None, *, summary_max_length: int = 150) -> None:
        self.llm = llm
        self.summary_max_length = summary_max_length

    @staticmethod
    def validate_text(text: str | None) -> str:
        return require_text(text, field="text", message="Text is required")

    @staticmethod
    def validate_prompt(prompt: str | None) -> str:
        return require_text(prompt, field="prompt", message="Prompt is required")

    def _require_client(self) -> AbstractLLMClient:
        if self.llm is None:
            raise LLMAppError(
                code="llm_not_configured",
                message="Inference provider is not configured",
            )
        return self.llm

    async def summarize(self, text: str | None) -> SummarizeResponse:
        """Summarize ``text`` with the summarization model.

        Raises:
            ValidationAppError: If text is empty.
            LLMAppError: If the provider call fails.
        """
        text = self.validate_text(text)
        llm = self._require_client()

        try:
            raw = await llm.summarize(text, max_length=self.summary_max_length)
        except Exception as exc:
            logger.error(
                "inference.summarize_failed",
                extra={
                    "provider": llm.name,
                    "error_type": type(exc).__name__,
                    "error_msg": str(exc),
                    "original_length": len(text),
                },
            )
            raise LLMAppError(
                code="summarization_failed",
                message=f"Summarization failed: {exc}",
                details={"original_length": len(text)},
            ) from exc

        summary = extract_summary(raw)
        logger.info(
            "inference.summarize",
            extra={
                "provider": llm.name,
                "original_length": len(text),
                "summary_length": len(summary),
                "response_keys": sorted(raw.keys()) if isinstance(raw, dict) else None,
            },
        )
        return SummarizeResponse(
            summary=summary,
            original_length=len(text),
            summary_length=len(summary),
        )

    async def generate(self, prompt: str | None) -> GenerateResponse:
        """Generate related content for ``prompt`` with the chat model.

        Raises:
            ValidationAppError: If prompt is empty.
            LLMAppError: If the provider call fails.
        """
        prompt = self.validate_prompt(prompt)
        llm = self._require_client()

        try:
            generated = await llm.chat(build_generate_messages(prompt))
        except Exception as exc:
            logger.error(
                "inference.generate_failed",
                extra={
                    "provider": llm.name,
                    "error_type": type(exc).__name__,
                    "error_msg": str(exc),
                },
            )
            raise LLMAppError(
                code="generation_failed",
                message=f"Generation failed: {exc}",
            ) from exc

        logger.info(
            "inference.generate",
            extra={
                "provider": llm.name,
                "prompt_length": len(prompt),
                "generated_length": len(generated),
            },
        )
        return GenerateResponse(generated=generated)
