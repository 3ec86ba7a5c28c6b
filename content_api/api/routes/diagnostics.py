from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from content_api.schemas.content import DiagnosticsResponse

router = APIRouter(tags=["Diagnostics"])

LIVENESS_MESSAGE = "AI Content Platform API is running!"

ENDPOINTS = {
    "summarize": "POST /api/summarize",
    "generate": "POST /api/generate",
    "save": "POST /api/save",
    "retrieve": "GET /api/retrieve",
}


def _binding_status(configured: bool) -> str:
    return "Connected" if configured else "Not connected"


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Liveness check returning a static message."""
    return LIVENESS_MESSAGE


@router.get("/api/test", response_model=DiagnosticsResponse)
def diagnostics(request: Request) -> DiagnosticsResponse:
    """Report which backing dependencies are configured.

    A binding counts as connected when its client was built at startup; no
    network round trip is made.
    """
    state = request.app.state
    return DiagnosticsResponse(
        endpoints=ENDPOINTS,
        bindings={
            "db": _binding_status(getattr(state, "db_engine", None) is not None),
            "kv": _binding_status(getattr(state, "kv_client", None) is not None),
            "ai": _binding_status(getattr(state, "llm_client", None) is not None),
        },
    )
