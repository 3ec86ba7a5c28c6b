"""Saving and listing summaries for the current owner."""

from __future__ import annotations

from content_api.adapters.storage.repository import SummaryRepository
from content_api.core.errors import ValidationAppError
from content_api.schemas.content import RetrieveResponse, SaveResponse, SummaryListItem

SAVE_REQUIRED_MESSAGE = "Title, original text, and summary are required"


def _is_blank(value: str | None) -> bool:
    return not isinstance(value, str) or not value.strip()


class ContentService:
    """Persistence operations scoped to a single owner.

    ``user_id`` is a fixed placeholder (APP_USER_ID) until requests carry a
    real identity; every save and every listing is scoped to it.
    """

    def __init__(self, repository: SummaryRepository, *, user_id: int, retrieve_limit: int = 10) -> None:
        self.repository = repository
        self.user_id = user_id
        self.retrieve_limit = retrieve_limit

    async def save(
        self,
        title: str | None,
        original_text: str | None,
        summary_text: str | None,
        generated_content: str | None = None,
    ) -> SaveResponse:
        """Store a new record and return its id.

        Raises:
            ValidationAppError: If title, original text or summary is empty.
            StorageAppError: If the insert fails.
        """
        missing = [
            name
            for name, value in (
                ("title", title),
                ("originalText", original_text),
                ("summary", summary_text),
            )
            if _is_blank(value)
        ]
        if missing:
            raise ValidationAppError(
                code="save_fields_required",
                message=SAVE_REQUIRED_MESSAGE,
                details={"missing": missing},
            )

        record_id = await self.repository.add(
            user_id=self.user_id,
            title=title,
            original_text=original_text,
            summary_text=summary_text,
            generated_content=generated_content or "",
        )
        return SaveResponse(id=record_id)

    async def retrieve(self) -> RetrieveResponse:
        rows = await self.repository.list_recent(user_id=self.user_id, limit=self.retrieve_limit)
        return RetrieveResponse(
            summaries=[SummaryListItem.model_validate(row._asdict()) for row in rows]
        )
