"""Factory pattern for creating inference client instances."""

from content_api.adapters.llm.base import AbstractLLMClient
from content_api.adapters.llm.openai_client import OpenAIClient
from content_api.adapters.llm.workers_ai_client import WorkersAIClient
from content_api.core.config import LLMSettings, settings
from content_api.core.errors import ValidationAppError

SUPPORTED_PROVIDERS = ("workers_ai", "openai")


def create_llm_client(llm_settings: LLMSettings | None = None) -> AbstractLLMClient:
    """Instantiate the inference client for the configured provider.

    Validates provider-specific requirements and routes to the right client.

    Args:
        llm_settings: Optional settings override; defaults to global settings.

    Returns:
        AbstractLLMClient: Configured client instance.

    Raises:
        ValidationAppError: If provider-specific requirements are not met.
    """
    cfg = llm_settings or settings.llm
    provider = cfg.provider.lower()

    if provider == "workers_ai":
        if not cfg.api_key or not cfg.account_id:
            raise ValidationAppError(
                code="llm_missing_credentials",
                message="Workers AI provider requires LLM_API_KEY and LLM_ACCOUNT_ID environment variables",
            )
        return WorkersAIClient(
            api_key=cfg.api_key,
            account_id=cfg.account_id,
            summarize_model=cfg.summarize_model,
            generate_model=cfg.generate_model,
            base_url=cfg.base_url,
            timeout_seconds=cfg.timeout_seconds,
        )

    if provider == "openai":
        if not cfg.api_key:
            raise ValidationAppError(
                code="llm_missing_api_key",
                message="OpenAI provider requires LLM_API_KEY environment variable",
            )
        return OpenAIClient(
            api_key=cfg.api_key,
            summarize_model=cfg.summarize_model,
            generate_model=cfg.generate_model,
            base_url=cfg.base_url,
            timeout_seconds=cfg.timeout_seconds,
        )

    raise ValidationAppError(
        code="llm_unknown_provider",
        message=(
            f"Unknown LLM provider: '{provider}'. Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        ),
    )
