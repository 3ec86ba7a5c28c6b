"""OpenAI inference client adapter."""

from typing import Any

from openai import AsyncOpenAI

from content_api.adapters.llm.base import AbstractLLMClient

SUMMARY_SYSTEM_PROMPT = (
    "Summarize the user's text in plain prose. Keep the summary under {max_length} words. "
    "Return only the summary."
)


class OpenAIClient(AbstractLLMClient):
    """Client for OpenAI-compatible chat completions.

    Both operations go through chat completions: summarization uses a fixed
    system prompt, generation forwards the caller's messages as-is.
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        summarize_model: str,
        generate_model: str,
        base_url: str | None = None,
        timeout_seconds: float = 45.0,
    ) -> None:
        """Initialize OpenAI async client.

        Args:
            api_key: OpenAI API key for authentication.
            summarize_model: Model name used for summaries (e.g., "gpt-4o-mini").
            generate_model: Model name used for chat generation.
            base_url: Optional custom base URL for OpenAI API.
            timeout_seconds: Timeout for requests in seconds.
        """
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
        )
        self.summarize_model = summarize_model
        self.generate_model = generate_model

    async def _complete(self, model: str, messages: list[dict[str, str]], **params: Any) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                **params,
            )
            content = response.choices[0].message.content
        except Exception as exc:
            raise RuntimeError(f"OpenAI API error: {str(exc)}") from exc

        if content is None:
            raise RuntimeError("LLM returned empty response")

        return content.strip()

    async def summarize(self, text: str, *, max_length: int) -> dict[str, Any]:
        messages = [
            {"role": "system", "content": SUMMARY_SYSTEM_PROMPT.format(max_length=max_length)},
            {"role": "user", "content": text},
        ]
        # Tokens run roughly 4/3 per word; leave headroom so the answer isn't cut mid-sentence
        summary = await self._complete(
            self.summarize_model,
            messages,
            max_tokens=max_length * 2,
            temperature=0.2,
        )
        return {"summary": summary}

    async def chat(self, messages: list[dict[str, str]]) -> str:
        return await self._complete(self.generate_model, messages)

    async def aclose(self) -> None:
        await self.client.close()
