"""User roles and their display labels."""

from enum import Enum


class Role(str, Enum):
    """Role tags assigned to every user account."""

    ADMIN = "admin"
    CEO = "ceo"
    MANAGER = "manager"
    STAFF = "staff"
    AGENCY = "agency"
    CLIENT = "client"


MANAGEMENT_ROLES = frozenset({Role.ADMIN.value, Role.CEO.value, Role.MANAGER.value})
EXECUTIVE_ROLES = frozenset({Role.ADMIN.value, Role.CEO.value})

ROLE_LABELS: dict[str, str] = {
    Role.ADMIN.value: "管理者",
    Role.CEO.value: "CEO",
    Role.MANAGER.value: "マネージャー",
    Role.STAFF.value: "スタッフ",
    Role.AGENCY.value: "代理店",
    Role.CLIENT.value: "クライアント",
}


def role_label(role: str | None) -> str:
    """Japanese label for a role; unknown roles are shown verbatim."""
    if not role:
        return ""
    return ROLE_LABELS.get(role, role)
