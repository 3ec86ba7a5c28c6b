"""Front-end state for one user session.

``ContentSession`` holds what a form-based front end keeps on screen: the
input text, its summary, the generation prompt and result, the title, the
list of saved records and a loading flag. Each action is one request and
one response; failures are reported as inline text or an alert message,
never retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from content_api.client.api_client import ContentAPIClient, ContentAPIError

logger = logging.getLogger(__name__)

SUMMARY_FALLBACK = "Summary not available"
SUMMARY_ERROR = "Error generating summary"
GENERATED_FALLBACK = "Content not available"
GENERATED_ERROR = "Error generating content"
SAVE_INCOMPLETE_ALERT = "Please fill in title, original text, and generate a summary first"
SAVE_SUCCESS_ALERT = "Content saved successfully!"
SAVE_ERROR_ALERT = "Error saving content"


@dataclass
class ContentSession:
    """Transient UI state bound to an API client."""

    client: ContentAPIClient
    text: str = ""
    summary: str = ""
    prompt: str = ""
    generated: str = ""
    title: str = ""
    saved: list[dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    alert: str | None = None

    def mount(self) -> bool:
        """Load the saved list once, as the page does when it first renders."""
        return self.refresh_saved()

    def refresh_saved(self) -> bool:
        """Reload the saved list; on failure the list keeps its previous contents."""
        try:
            self.saved = self.client.retrieve()
        except ContentAPIError as exc:
            logger.warning("client.retrieve_failed", extra={"error_msg": str(exc)})
            return False
        return True

    def summarize(self) -> None:
        if not self.text.strip():
            return

        self.loading = True
        try:
            result = self.client.summarize(self.text)
            self.summary = result.get("summary") or SUMMARY_FALLBACK
        except ContentAPIError as exc:
            logger.warning("client.summarize_failed", extra={"error_msg": str(exc)})
            self.summary = SUMMARY_ERROR
        finally:
            self.loading = False

    def generate(self) -> None:
        if not self.prompt.strip():
            return

        self.loading = True
        try:
            result = self.client.generate(self.prompt)
            self.generated = result.get("generated") or GENERATED_FALLBACK
        except ContentAPIError as exc:
            logger.warning("client.generate_failed", extra={"error_msg": str(exc)})
            self.generated = GENERATED_ERROR
        finally:
            self.loading = False

    def save(self) -> bool:
        """Save the current form; on success clear it and reload the list.

        Returns:
            bool: True when the record was stored.
        """
        if not (self.title.strip() and self.text.strip() and self.summary.strip()):
            self.alert = SAVE_INCOMPLETE_ALERT
            return False

        self.loading = True
        try:
            self.client.save(
                title=self.title,
                original_text=self.text,
                summary=self.summary,
                generated_content=self.generated,
            )
        except ContentAPIError as exc:
            logger.warning("client.save_failed", extra={"error_msg": str(exc)})
            self.alert = SAVE_ERROR_ALERT
            return False
        finally:
            self.loading = False

        self.alert = SAVE_SUCCESS_ALERT
        self.clear_form()
        self.refresh_saved()
        return True

    def clear_form(self) -> None:
        self.title = ""
        self.text = ""
        self.summary = ""
        self.generated = ""
        self.prompt = ""
