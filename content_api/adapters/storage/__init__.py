"""Relational storage for saved summaries."""

from content_api.adapters.storage.database import create_database_engine, create_schema, create_session_factory
from content_api.adapters.storage.models import Base, Summary
from content_api.adapters.storage.repository import SummaryRepository

__all__ = [
    "Base",
    "Summary",
    "SummaryRepository",
    "create_database_engine",
    "create_schema",
    "create_session_factory",
]
