from __future__ import annotations

from content_api.api.routes.content import router as content_router
from content_api.api.routes.diagnostics import router as diagnostics_router
from content_api.api.routes.inference import router as inference_router

__all__ = ["content_router", "diagnostics_router", "inference_router"]
