"""Complexity analyzer endpoints."""

from fastapi import APIRouter, Depends, Query

from codeshelf.domain.services.complexity.notation import (
    get_complexity_color,
    get_complexity_description,
    get_complexity_power,
)
from codeshelf.domain.services.complexity_service import ComplexityAnalysisService
from codeshelf.presentation.api.dependencies import get_complexity_service
from codeshelf.presentation.api.schemas import (
    AnalyzeRequest,
    ComplexityAnalysisResponse,
    NotationResponse,
)


def create_analysis_router() -> APIRouter:
    router = APIRouter(prefix="/analysis", tags=["analysis"])

    @router.post("/complexity", response_model=ComplexityAnalysisResponse)
    async def analyze(
        payload: AnalyzeRequest,
        analyzer: ComplexityAnalysisService = Depends(get_complexity_service),
    ):
        """Suggest a time complexity label for a piece of code."""
        analysis = analyzer.analyze(payload.code, payload.language)
        label = analysis.estimated_complexity
        return ComplexityAnalysisResponse.from_domain(
            analysis,
            color=get_complexity_color(label),
            description=get_complexity_description(label),
        )

    @router.get("/notation", response_model=NotationResponse)
    async def describe_notation(label: str = Query(..., min_length=1, max_length=50)):
        return NotationResponse(
            label=label,
            power=get_complexity_power(label),
            color=get_complexity_color(label),
            description=get_complexity_description(label),
        )

    return router


__all__ = ["create_analysis_router"]
