from fastapi import APIRouter, Depends

from content_api.api.deps import get_content_service
from content_api.schemas.content import RetrieveResponse, SaveRequest, SaveResponse
from content_api.services.content_service import ContentService

router = APIRouter(prefix="/api", tags=["Content"])


@router.post("/save", response_model=SaveResponse)
async def save(
    payload: SaveRequest,
    service: ContentService = Depends(get_content_service),
) -> SaveResponse:
    """Store a summary with its title, original text and optional generated content."""
    return await service.save(
        title=payload.title,
        original_text=payload.original_text,
        summary_text=payload.summary,
        generated_content=payload.generated_content,
    )


@router.get("/retrieve", response_model=RetrieveResponse)
async def retrieve(service: ContentService = Depends(get_content_service)) -> RetrieveResponse:
    """List the most recent saved summaries, newest first."""
    return await service.retrieve()
