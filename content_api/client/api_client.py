"""HTTP client for the content platform API."""

from __future__ import annotations

from typing import Any

import httpx

DEFAULT_BASE_URL = "http://localhost:8000"


class ContentAPIError(Exception):
    """Raised for any failed call: network error, non-2xx status, or bad body."""


class ContentAPIClient:
    """Thin synchronous wrapper over the API endpoints.

    Attributes:
        base_url: Root URL of the API.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout_seconds: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> "ContentAPIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise ContentAPIError(f"Request to {path} failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            raise ContentAPIError(message or f"{path} returned HTTP {response.status_code}")
        if not isinstance(body, dict):
            raise ContentAPIError(f"{path} returned a non-JSON body")
        return body

    def summarize(self, text: str) -> dict[str, Any]:
        return self._request("POST", "/api/summarize", {"text": text})

    def generate(self, prompt: str) -> dict[str, Any]:
        return self._request("POST", "/api/generate", {"prompt": prompt})

    def save(
        self,
        *,
        title: str,
        original_text: str,
        summary: str,
        generated_content: str = "",
    ) -> dict[str, Any]:
        return self._request(
            "POST",
            "/api/save",
            {
                "title": title,
                "originalText": original_text,
                "summary": summary,
                "generatedContent": generated_content,
            },
        )

    def retrieve(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/retrieve").get("summaries") or []

    def status(self) -> dict[str, Any]:
        return self._request("GET", "/api/test")
