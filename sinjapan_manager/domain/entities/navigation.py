"""Role-based navigation: sidebar menu items, dashboard quick actions, permissions.

Everything here is a static table keyed by the role string. Unknown roles
fall back to the dashboard only and get no quick actions.
"""

from dataclasses import dataclass

from .role import EXECUTIVE_ROLES, MANAGEMENT_ROLES, Role


@dataclass(frozen=True)
class MenuItem:
    """A single sidebar entry."""

    key: str
    label: str
    href: str


@dataclass(frozen=True)
class QuickAction:
    """A dashboard shortcut button."""

    href: str
    label: str
    icon: str


MENU_ITEMS: dict[str, MenuItem] = {
    item.key: item
    for item in (
        MenuItem("dashboard", "ホーム", "/"),
        MenuItem("tasks", "タスク", "/tasks"),
        MenuItem("calendar", "カレンダー", "/calendar"),
        MenuItem("chat", "コミュニケーション", "/communication"),
        MenuItem("customers", "顧客", "/customers"),
        MenuItem("leads", "リード", "/leads"),
        MenuItem("business", "事業", "/business"),
        MenuItem("business_designs", "事業設計", "/designs"),
        MenuItem("seo_articles", "SEO記事", "/seo-articles"),
        MenuItem("ai", "AI", "/ai"),
        MenuItem("study", "学習", "/study"),
        MenuItem("translation", "翻訳", "/translation"),
        MenuItem("staff", "スタッフ", "/staff"),
        MenuItem("employees", "従業員", "/employees"),
        MenuItem("agency", "代理店", "/agency"),
        MenuItem("agency_sales", "代理店売上", "/agency-sales"),
        MenuItem("clients", "クライアント", "/clients"),
        MenuItem("users", "ユーザー管理", "/users"),
        MenuItem("documents", "書類", "/documents"),
        MenuItem("notifications", "通知", "/notifications"),
        MenuItem("settings", "設定", "/settings"),
    )
}

_EXECUTIVE_MENU = (
    "dashboard", "tasks", "calendar", "chat", "customers", "leads",
    "business", "business_designs", "seo_articles", "ai", "study",
    "translation", "staff", "employees", "agency", "agency_sales",
    "clients", "users", "notifications", "settings",
)

ROLE_MENUS: dict[str, tuple[str, ...]] = {
    Role.ADMIN.value: _EXECUTIVE_MENU,
    Role.CEO.value: _EXECUTIVE_MENU,
    Role.MANAGER.value: tuple(k for k in _EXECUTIVE_MENU if k != "users"),
    Role.STAFF.value: (
        "dashboard", "tasks", "calendar", "chat", "customers", "leads",
        "study", "translation", "notifications", "settings",
    ),
    Role.AGENCY.value: (
        "dashboard", "agency_sales", "customers", "chat", "notifications", "settings",
    ),
    Role.CLIENT.value: ("dashboard", "documents", "chat", "notifications"),
}

_FALLBACK_MENU = ("dashboard",)

_MANAGEMENT_ACTIONS = (
    QuickAction("/customers", "顧客を追加", "plus"),
    QuickAction("/tasks", "タスクを作成", "clipboard-list"),
    QuickAction("/notifications", "通知を送信", "bell"),
    QuickAction("/chat", "チャットを開く", "message-square"),
)

QUICK_ACTIONS: dict[str, tuple[QuickAction, ...]] = {
    Role.ADMIN.value: _MANAGEMENT_ACTIONS,
    Role.CEO.value: _MANAGEMENT_ACTIONS,
    Role.MANAGER.value: _MANAGEMENT_ACTIONS,
    Role.STAFF.value: (
        QuickAction("/customers", "顧客一覧", "building"),
        QuickAction("/tasks", "タスク一覧", "clipboard-list"),
        QuickAction("/chat", "チャットを開く", "message-square"),
    ),
    Role.AGENCY.value: (
        QuickAction("/agency-sales", "売上を確認", "trending-up"),
        QuickAction("/customers", "顧客一覧", "building"),
        QuickAction("/chat", "チャットを開く", "message-square"),
    ),
    Role.CLIENT.value: (
        QuickAction("/chat", "担当者に連絡", "message-square"),
        QuickAction("/notifications", "通知を確認", "bell"),
    ),
}

# action -> roles allowed to perform it
PERMISSIONS: dict[str, frozenset[str]] = {
    "users.list": MANAGEMENT_ROLES,
    "users.create": MANAGEMENT_ROLES,
    "users.update": MANAGEMENT_ROLES,
    "users.delete": EXECUTIVE_ROLES,
    "employees.list": MANAGEMENT_ROLES,
    "notifications.bulk": MANAGEMENT_ROLES,
    "ai.logs": MANAGEMENT_ROLES,
}


def menu_for_role(role: str | None) -> list[MenuItem]:
    """Sidebar items visible to ``role``, in display order."""
    keys = ROLE_MENUS.get(role or "", _FALLBACK_MENU)
    return [MENU_ITEMS[key] for key in keys]


def quick_actions_for_role(role: str | None) -> list[QuickAction]:
    return list(QUICK_ACTIONS.get(role or "", ()))


def can_perform(role: str | None, action: str) -> bool:
    """Whether ``role`` may perform ``action``; unlisted actions are open."""
    allowed = PERMISSIONS.get(action)
    if allowed is None:
        return True
    return role in allowed
