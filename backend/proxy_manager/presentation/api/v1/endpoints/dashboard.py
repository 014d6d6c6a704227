"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends

from proxy_manager.application.schemas import DashboardStatsResponse
from proxy_manager.application.services import DashboardService
from proxy_manager.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    """Fleet counts, user count and the most recent sessions."""
    stats = await service.snapshot()
    return DashboardStatsResponse.model_validate(stats, from_attributes=True)
