from fastapi import APIRouter, Depends, Request

from content_api.api.deps import get_inference_service
from content_api.core.rate_limit import enforce_rate_limit
from content_api.schemas.content import (
    GenerateRequest,
    GenerateResponse,
    SummarizeRequest,
    SummarizeResponse,
)
from content_api.services.inference_service import InferenceService

router = APIRouter(prefix="/api", tags=["Inference"])


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(
    payload: SummarizeRequest,
    request: Request,
    service: InferenceService = Depends(get_inference_service),
) -> SummarizeResponse:
    """Summarize the submitted text.

    The text is checked before the rate limit is consumed, so an empty
    request neither reaches the provider nor spends the caller's budget.
    """
    text = service.validate_text(payload.text)
    await enforce_rate_limit(request)
    return await service.summarize(text)


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    payload: GenerateRequest,
    request: Request,
    service: InferenceService = Depends(get_inference_service),
) -> GenerateResponse:
    """Generate related content from a prompt with the chat model."""
    prompt = service.validate_prompt(payload.prompt)
    await enforce_rate_limit(request)
    return await service.generate(prompt)
