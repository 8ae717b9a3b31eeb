"""Role-based sidebar menu endpoints."""

from fastapi import APIRouter, Depends

from sinjapan_manager.application.schemas import (
    MenuItemResponse,
    NavigationResponse,
    RoleResponse,
    User,
)
from sinjapan_manager.domain.entities.navigation import menu_for_role
from sinjapan_manager.domain.entities.role import ROLE_LABELS, role_label
from sinjapan_manager.infrastructure.dependencies import get_current_user

router = APIRouter(prefix="/navigation", tags=["Navigation"])


def _navigation(role: str | None) -> NavigationResponse:
    return NavigationResponse(
        role=role,
        role_label=role_label(role),
        items=[MenuItemResponse.model_validate(item) for item in menu_for_role(role)],
    )


@router.get("/menu", response_model=NavigationResponse)
async def my_menu(user: User = Depends(get_current_user)) -> NavigationResponse:
    """Sidebar for the signed-in user."""
    return _navigation(user.role)


@router.get("/menu/{role}", response_model=NavigationResponse)
async def menu_for(role: str) -> NavigationResponse:
    """Sidebar for an arbitrary role; unknown roles get the dashboard only."""
    return _navigation(role)


@router.get("/roles", response_model=list[RoleResponse])
async def list_roles() -> list[RoleResponse]:
    return [RoleResponse(role=role, label=label) for role, label in ROLE_LABELS.items()]
