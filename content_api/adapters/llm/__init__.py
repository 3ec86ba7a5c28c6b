"""LLM adapter layer - abstracts over inference providers."""

from content_api.adapters.llm.base import AbstractLLMClient
from content_api.adapters.llm.factory import create_llm_client
from content_api.adapters.llm.openai_client import OpenAIClient
from content_api.adapters.llm.response import SUMMARY_PLACEHOLDER, extract_summary
from content_api.adapters.llm.workers_ai_client import WorkersAIClient

__all__ = [
    "AbstractLLMClient",
    "OpenAIClient",
    "SUMMARY_PLACEHOLDER",
    "WorkersAIClient",
    "create_llm_client",
    "extract_summary",
]
