"""Pydantic schemas for request and response bodies."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SummarizeRequest(BaseModel):
    """Body of POST /api/summarize.

    ``text`` is optional at the schema level; emptiness is checked by the
    service so the error message matches the other validation failures.
    """

    text: str | None = Field(default=None, description="Text to summarize.")


class SummarizeResponse(BaseModel):
    summary: str = Field(..., description="Summary returned by the model (or a placeholder).")
    original_length: int = Field(..., description="Character count of the submitted text.")
    summary_length: int = Field(..., description="Character count of the summary.")


class GenerateRequest(BaseModel):
    prompt: str | None = Field(default=None, description="Prompt to expand into related content.")


class GenerateResponse(BaseModel):
    generated: str = Field(..., description="Raw text produced by the chat model.")


class SaveRequest(BaseModel):
    """Body of POST /api/save (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    original_text: str | None = Field(default=None, alias="originalText")
    summary: str | None = None
    generated_content: str | None = Field(default=None, alias="generatedContent")


class SaveResponse(BaseModel):
    id: int = Field(..., description="Identifier of the stored record.")
    message: str = Field(default="Content saved successfully")


class SummaryListItem(BaseModel):
    """One entry of GET /api/retrieve; original text and generated content are not returned."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    summary_text: str
    created_at: datetime


class RetrieveResponse(BaseModel):
    summaries: list[SummaryListItem] = Field(default_factory=list)


class DiagnosticsResponse(BaseModel):
    message: str = "API is working!"
    endpoints: dict[str, str]
    bindings: dict[str, str]
