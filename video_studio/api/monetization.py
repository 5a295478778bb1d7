"""FastAPI routes for creator revenue."""

from fastapi import APIRouter, Depends

from video_studio.api.deps import get_monetization_service
from video_studio.models.base import ApiResponse, CamelModel
from video_studio.models.monetization import PlatformCredential, RevenueSummary
from video_studio.services.monetization import MonetizationService, mock_revenue_summary

router = APIRouter(prefix="/monetization", tags=["monetization"])


class RevenueRequest(CamelModel):
    """Request model for revenue aggregation."""

    platforms: list[PlatformCredential]


@router.post("/revenue", response_model=ApiResponse[RevenueSummary])
async def aggregate_revenue(
    request: RevenueRequest,
    service: MonetizationService = Depends(get_monetization_service),
) -> ApiResponse[RevenueSummary]:
    """Aggregate revenue across the supplied platform credentials."""
    summary = await service.summarize(request.platforms)
    return ApiResponse[RevenueSummary](data=summary)


@router.get("/revenue", response_model=ApiResponse[RevenueSummary])
async def get_demo_revenue() -> ApiResponse[RevenueSummary]:
    """Static dashboard data for a creator with no connected platforms."""
    return ApiResponse[RevenueSummary](data=mock_revenue_summary())
