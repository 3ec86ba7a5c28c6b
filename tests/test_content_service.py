"""Tests for ContentService and SummaryRepository against in-memory SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from content_api.adapters.storage.models import Summary
from content_api.core.errors import ValidationAppError
from content_api.services.content_service import SAVE_REQUIRED_MESSAGE, ContentService


@pytest.fixture
def service(repository) -> ContentService:
    return ContentService(repository, user_id=1, retrieve_limit=10)


class TestSave:
    @pytest.mark.asyncio
    async def test_returns_positive_id(self, service) -> None:
        result = await service.save("T", "hello world", "hi")

        assert result.id == 1
        assert result.message == "Content saved successfully"

    @pytest.mark.asyncio
    async def test_ids_increase(self, service) -> None:
        first = await service.save("A", "text a", "sum a")
        second = await service.save("B", "text b", "sum b")

        assert second.id > first.id > 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("title", "original_text", "summary"),
        [
            ("", "text", "sum"),
            ("T", "", "sum"),
            ("T", "text", ""),
            ("  ", "text", "sum"),
            (None, None, None),
        ],
    )
    async def test_missing_required_field_fails(self, service, repository, title, original_text, summary) -> None:
        with pytest.raises(ValidationAppError) as exc_info:
            await service.save(title, original_text, summary)

        assert exc_info.value.message == SAVE_REQUIRED_MESSAGE
        assert await repository.list_recent(user_id=1) == []

    @pytest.mark.asyncio
    async def test_generated_content_defaults_to_empty(self, service, repository) -> None:
        result = await service.save("T", "text", "sum", None)

        async with repository.session_factory() as session:
            row = (await session.execute(select(Summary).where(Summary.id == result.id))).scalar_one()

        assert row.generated_content == ""
        assert row.user_id == 1
        assert row.original_text == "text"
        assert row.created_at is not None

    @pytest.mark.asyncio
    async def test_generated_content_is_stored(self, service, repository) -> None:
        result = await service.save("T", "text", "sum", "extra ideas")

        async with repository.session_factory() as session:
            row = await session.get(Summary, result.id)

        assert row.generated_content == "extra ideas"


class TestRetrieve:
    @pytest.mark.asyncio
    async def test_empty_store(self, service) -> None:
        result = await service.retrieve()

        assert result.summaries == []

    @pytest.mark.asyncio
    async def test_projects_listing_fields_only(self, service) -> None:
        await service.save("T", "hello world", "hi", "generated")

        result = await service.retrieve()

        item = result.summaries[0].model_dump()
        assert set(item) == {"id", "title", "summary_text", "created_at"}
        assert item["id"] == 1
        assert item["title"] == "T"
        assert item["summary_text"] == "hi"

    @pytest.mark.asyncio
    async def test_returns_at_most_ten_newest_first(self, service) -> None:
        for i in range(12):
            await service.save(f"title {i}", f"text {i}", f"sum {i}")

        result = await service.retrieve()

        titles = [item.title for item in result.summaries]
        assert len(titles) == 10
        assert titles == [f"title {i}" for i in range(11, 1, -1)]

    @pytest.mark.asyncio
    async def test_orders_by_created_at_not_id(self, service, repository) -> None:
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        async with repository.session_factory() as session:
            async with session.begin():
                session.add_all(
                    [
                        Summary(user_id=1, title="middle", original_text="x", summary_text="x",
                                created_at=base + timedelta(minutes=5)),
                        Summary(user_id=1, title="oldest", original_text="x", summary_text="x",
                                created_at=base),
                        Summary(user_id=1, title="newest", original_text="x", summary_text="x",
                                created_at=base + timedelta(minutes=10)),
                    ]
                )

        result = await service.retrieve()

        assert [item.title for item in result.summaries] == ["newest", "middle", "oldest"]

    @pytest.mark.asyncio
    async def test_scoped_to_configured_user(self, service, repository) -> None:
        await repository.add(user_id=2, title="other", original_text="x", summary_text="x")
        await service.save("mine", "x", "x")

        result = await service.retrieve()

        assert [item.title for item in result.summaries] == ["mine"]

    @pytest.mark.asyncio
    async def test_limit_is_configurable(self, repository) -> None:
        service = ContentService(repository, user_id=1, retrieve_limit=2)
        for i in range(3):
            await service.save(f"t{i}", "x", "x")

        result = await service.retrieve()

        assert [item.title for item in result.summaries] == ["t2", "t1"]
