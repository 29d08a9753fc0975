from __future__ import annotations

from fastapi import APIRouter, Depends

from app.deps import get_providers
from app.schemas.analyze import AnalyzeRequest, AnalyzeResponse
from app.services.analyze_service import analyze
from core.providers.loader import Providers

router = APIRouter()


@router.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(
    payload: AnalyzeRequest,
    providers: Providers = Depends(get_providers),
) -> AnalyzeResponse:
    sources = [source.model_dump() for source in payload.cited_sources]
    result = await analyze(payload.user_query, sources, providers)
    return AnalyzeResponse.model_validate(result)
