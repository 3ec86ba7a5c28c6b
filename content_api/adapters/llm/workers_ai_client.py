"""Cloudflare Workers AI client adapter (REST API)."""

from __future__ import annotations

from typing import Any

import httpx

from content_api.adapters.llm.base import AbstractLLMClient

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"


class WorkersAIClient(AbstractLLMClient):
    """Client for the Workers AI ``/ai/run/{model}`` endpoint.

    Responses arrive wrapped in the Cloudflare envelope
    ``{"success": bool, "errors": [...], "result": {...}}``; ``result`` is the
    model output.
    """

    name = "workers_ai"

    def __init__(
        self,
        api_key: str,
        account_id: str,
        summarize_model: str,
        generate_model: str,
        base_url: str | None = None,
        timeout_seconds: float = 45.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            api_key: Cloudflare API token with Workers AI permission.
            account_id: Cloudflare account id owning the models.
            summarize_model: Summarization model id (e.g., "@cf/facebook/bart-large-cnn").
            generate_model: Chat model id (e.g., "@cf/mistral/mistral-7b-instruct-v0.1").
            base_url: Optional override of the Cloudflare API root.
            timeout_seconds: Timeout for requests in seconds.
            transport: Optional httpx transport (tests use ``httpx.MockTransport``).
        """
        root = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=f"{root}/accounts/{account_id}/ai/run/",
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout_seconds,
            transport=transport,
        )
        self.summarize_model = summarize_model
        self.generate_model = generate_model

    async def _run(self, model: str, payload: dict[str, Any]) -> Any:
        try:
            response = await self.client.post(model, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            raise RuntimeError(
                f"Workers AI returned HTTP {exc.response.status_code} for {model}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise RuntimeError(f"Workers AI request failed: {str(exc)}") from exc

        if isinstance(body, dict) and body.get("success") is False:
            errors = body.get("errors") or []
            detail = "; ".join(
                str(e.get("message", e) if isinstance(e, dict) else e) for e in errors if e
            ) or "unknown error"
            raise RuntimeError(f"Workers AI error: {detail}")

        return body.get("result") if isinstance(body, dict) else body

    async def summarize(self, text: str, *, max_length: int) -> dict[str, Any]:
        result = await self._run(
            self.summarize_model,
            {"input_text": text, "max_length": max_length},
        )
        return result if isinstance(result, dict) else {"result": result}

    async def chat(self, messages: list[dict[str, str]]) -> str:
        result = await self._run(self.generate_model, {"messages": messages})
        if isinstance(result, dict):
            reply = result.get("response")
            if isinstance(reply, str):
                return reply
        raise RuntimeError("Workers AI returned no response text")

    async def aclose(self) -> None:
        await self.client.aclose()
