"""Data access for saved summaries."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import NamedTuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from content_api.adapters.storage.models import Summary
from content_api.core.errors import StorageAppError

logger = logging.getLogger(__name__)


class SummaryRow(NamedTuple):
    """Projection returned by ``list_recent``; original and generated text are left out."""

    id: int
    title: str
    summary_text: str
    created_at: datetime


class SummaryRepository:
    """Inserts and lists rows of the ``summaries`` table.

    Attributes:
        session_factory: Factory producing ``AsyncSession`` objects.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self.session_factory = session_factory

    async def add(
        self,
        *,
        user_id: int,
        title: str,
        original_text: str,
        summary_text: str,
        generated_content: str = "",
    ) -> int:
        """Insert a new summary row.

        Returns:
            int: The generated row id.

        Raises:
            StorageAppError: If the insert fails.
        """
        record = Summary(
            user_id=user_id,
            title=title,
            original_text=original_text,
            summary_text=summary_text,
            generated_content=generated_content,
        )
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    session.add(record)
                    await session.flush()
                    record_id = record.id
        except SQLAlchemyError as exc:
            logger.error(
                "storage.insert_failed",
                extra={"error_type": type(exc).__name__, "user_id": user_id},
            )
            raise StorageAppError(
                code="storage_insert_failed",
                message=f"Failed to save content: {exc.__class__.__name__}",
            ) from exc

        logger.info("storage.saved", extra={"record_id": record_id, "user_id": user_id})
        return record_id

    async def list_recent(self, *, user_id: int, limit: int = 10) -> list[SummaryRow]:
        """Return the newest rows for ``user_id``, newest first.

        Raises:
            StorageAppError: If the query fails.
        """
        stmt = (
            select(Summary.id, Summary.title, Summary.summary_text, Summary.created_at)
            .where(Summary.user_id == user_id)
            .order_by(Summary.created_at.desc(), Summary.id.desc())
            .limit(limit)
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = [SummaryRow(*row) for row in result.all()]
        except SQLAlchemyError as exc:
            logger.error(
                "storage.query_failed",
                extra={"error_type": type(exc).__name__, "user_id": user_id},
            )
            raise StorageAppError(
                code="storage_query_failed",
                message=f"Failed to retrieve content: {exc.__class__.__name__}",
            ) from exc

        logger.debug("storage.listed", extra={"count": len(rows), "user_id": user_id})
        return rows
