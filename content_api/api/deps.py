"""Request-scoped accessors for the services built at startup."""

from __future__ import annotations

from fastapi import Request

from content_api.core.errors import StorageAppError
from content_api.services.content_service import ContentService
from content_api.services.inference_service import InferenceService


def get_inference_service(request: Request) -> InferenceService:
    return request.app.state.inference_service


def get_content_service(request: Request) -> ContentService:
    service: ContentService | None = getattr(request.app.state, "content_service", None)
    if service is None:
        raise StorageAppError(
            code="storage_not_configured",
            message="Database is not configured",
        )
    return service
