"""OpenAPI metadata and customization utilities.

Adds tag descriptions to the generated schema. Kept apart from the app
factory so documentation concerns stay in one place.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI

TAGS_METADATA = [
    {
        "name": "Inference",
        "description": "Summarization and content generation (rate limited per client).",
    },
    {
        "name": "Content",
        "description": "Save and list summaries.",
    },
    {
        "name": "Diagnostics",
        "description": "Liveness message and dependency status.",
    },
]


def apply_openapi_customizations(app: FastAPI) -> None:
    """Patch FastAPI's OpenAPI generation to add tags metadata."""

    original_openapi = app.openapi

    def custom_openapi() -> Dict[str, Any]:
        schema = original_openapi()

        tags = schema.setdefault("tags", [])
        existing_tag_names = {t.get("name") for t in tags}
        for tag in TAGS_METADATA:
            if tag["name"] not in existing_tag_names:
                tags.append(tag)

        return schema

    app.openapi = custom_openapi  # type: ignore[assignment]
