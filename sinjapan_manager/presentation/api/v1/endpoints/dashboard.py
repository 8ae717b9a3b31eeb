"""Dashboard landing page endpoint."""

from fastapi import APIRouter, Depends

from sinjapan_manager.application.schemas import DashboardResponse, User
from sinjapan_manager.application.services import DashboardService
from sinjapan_manager.infrastructure.dependencies import get_current_user, get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Greeting, role label, stats and quick actions for the current user."""
    return await service.overview(user)
