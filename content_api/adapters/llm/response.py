"""Normalization of summarization responses.

Providers disagree on where the summary lives. The accepted response schema
is a JSON object carrying the summary as a non-empty string under one of
``SUMMARY_FIELDS``, checked in order. ``result`` may also be a nested object
with the same layout (the Workers AI REST envelope). Anything else yields
``SUMMARY_PLACEHOLDER``.
"""

from __future__ import annotations

from typing import Any, Mapping

SUMMARY_FIELDS: tuple[str, ...] = ("summary", "output", "result")
SUMMARY_PLACEHOLDER = "Summary not available"


def extract_summary(response: Any) -> str:
    """Return the summary text from a provider response.

    Args:
        response: Parsed provider payload.

    Returns:
        str: Summary text, or ``SUMMARY_PLACEHOLDER`` when none is present.

    Examples:
        >>> extract_summary({"summary": "short"})
        'short'
        >>> extract_summary({"result": {"summary": "nested"}})
        'nested'
        >>> extract_summary({"unexpected": 1})
        'Summary not available'
    """
    if not isinstance(response, Mapping):
        return SUMMARY_PLACEHOLDER

    for field in SUMMARY_FIELDS:
        value = response.get(field)
        if isinstance(value, str) and value.strip():
            return value
        if field == "result" and isinstance(value, Mapping):
            return extract_summary(value)

    return SUMMARY_PLACEHOLDER
