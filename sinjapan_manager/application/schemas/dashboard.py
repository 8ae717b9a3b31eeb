"""Pydantic DTOs for the dashboard and the navigation shell."""

from typing import Any

from pydantic import Field

from .base import CamelModel
from .user import User


class MenuItemResponse(CamelModel):
    key: str
    label: str
    href: str

    model_config = {"from_attributes": True}


class QuickActionResponse(CamelModel):
    href: str
    label: str
    icon: str

    model_config = {"from_attributes": True}


class NavigationResponse(CamelModel):
    """The sidebar for one role."""

    role: str | None
    role_label: str
    items: list[MenuItemResponse] = Field(default_factory=list)


class RoleResponse(CamelModel):
    role: str
    label: str


class DashboardResponse(CamelModel):
    user: User
    greeting: str
    role_label: str
    stats: dict[str, Any] = Field(default_factory=dict)
    quick_actions: list[QuickActionResponse] = Field(default_factory=list)
