from __future__ import annotations

"""Application factory for FastAPI app.

Centralizes app construction (metadata, middleware, handlers, routers) and
the lifespan that opens and closes the external clients: the relational
store (SQLAlchemy), the key-value store (Redis) and the inference provider.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from content_api.adapters.llm.base import AbstractLLMClient
from content_api.adapters.llm.factory import create_llm_client
from content_api.adapters.rate_limit.factory import create_kv_client, create_rate_limiter
from content_api.adapters.storage.database import (
    create_database_engine,
    create_schema,
    create_session_factory,
)
from content_api.adapters.storage.repository import SummaryRepository
from content_api.api.routes import content_router, diagnostics_router, inference_router
from content_api.core.config import settings
from content_api.core.errors import ValidationAppError
from content_api.core.exception_handlers import setup_exception_handlers
from content_api.core.logging import configure_logging
from content_api.core.middleware import cors_middleware, request_id_middleware
from content_api.core.openapi import apply_openapi_customizations
from content_api.services.content_service import ContentService
from content_api.services.inference_service import InferenceService

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def _build_llm_client() -> AbstractLLMClient | None:
    try:
        return create_llm_client()
    except ValidationAppError as exc:
        # The API still serves storage endpoints; inference calls fail with a 500
        logger.warning(
            "startup.llm_unavailable",
            extra={"error_code": exc.code, "provider": settings.llm.provider},
        )
        return None


def _build_lifespan(
    *,
    llm_client: AbstractLLMClient | None,
    kv_client: Any,
    db_engine: AsyncEngine | None,
):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        llm = _build_llm_client() if llm_client is _UNSET else llm_client
        kv = create_kv_client() if kv_client is _UNSET else kv_client
        if db_engine is _UNSET:
            engine = (
                create_database_engine(settings.db.url, echo=settings.db.echo)
                if settings.db.url
                else None
            )
        else:
            engine = db_engine

        try:
            content_service = None
            if engine is not None:
                await create_schema(engine)
                repository = SummaryRepository(create_session_factory(engine))
                content_service = ContentService(
                    repository,
                    user_id=settings.app.user_id,
                    retrieve_limit=settings.app.retrieve_limit,
                )

            app.state.llm_client = llm
            app.state.kv_client = kv
            app.state.db_engine = engine
            app.state.rate_limiter = create_rate_limiter(kv) if kv is not None else None
            app.state.inference_service = InferenceService(
                llm,
                summary_max_length=settings.llm.summary_max_length,
            )
            app.state.content_service = content_service

            logger.info(
                "startup.complete",
                extra={
                    "app_env": settings.app_env,
                    "provider": llm.name if llm else None,
                    "db_configured": engine is not None,
                    "kv_configured": kv is not None,
                },
            )
            yield
        finally:
            # Only close what this lifespan opened; injected clients belong to the caller
            if llm is not None and llm_client is _UNSET:
                await llm.aclose()
            if kv is not None and kv_client is _UNSET:
                await kv.aclose()
            if engine is not None and db_engine is _UNSET:
                await engine.dispose()
            logger.info("shutdown.complete")

    return lifespan


def create_app(
    *,
    llm_client: AbstractLLMClient | None = _UNSET,
    kv_client: Any = _UNSET,
    db_engine: AsyncEngine | None = _UNSET,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Clients are built from settings at startup unless passed explicitly;
    passing ``None`` leaves that dependency unconfigured.

    Args:
        llm_client: Inference client override.
        kv_client: Async key-value client override for rate limit counters.
        db_engine: SQLAlchemy async engine override.

    Returns:
        Configured FastAPI app with middleware, handlers, routers and docs.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="AI Content Platform API",
        description=(
            "Summarizes text and generates related content through a hosted "
            "inference provider, and stores summaries for later retrieval. "
            "Inference endpoints are rate limited per client."
        ),
        version="0.1.0",
        lifespan=_build_lifespan(
            llm_client=llm_client,
            kv_client=kv_client,
            db_engine=db_engine,
        ),
    )

    # Middleware (last registered runs first)
    app.middleware("http")(cors_middleware)
    app.middleware("http")(request_id_middleware)

    # Exception handlers
    setup_exception_handlers(app)

    # Routers
    app.include_router(diagnostics_router)
    app.include_router(inference_router)
    app.include_router(content_router)

    # OpenAPI customizations (tags metadata)
    apply_openapi_customizations(app)

    return app
