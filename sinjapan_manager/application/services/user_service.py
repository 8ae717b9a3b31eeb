"""Application service for user accounts (staff, agency and client pages)."""

from typing import Any

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import Mutation, RecordId, User, UserCreate, UserUpdate
from sinjapan_manager.domain.entities.navigation import can_perform
from sinjapan_manager.domain.exceptions import PermissionDeniedError

from .resource_service import ResourceService


class UserService(ResourceService[User]):
    """User accounts with role checks applied before anything is forwarded.

    The role filter is local: the backend returns every account and each
    page keeps the role it manages.
    """

    search_fields = ("name", "email")
    local_filters = ("role",)

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, User, "User")

    def ensure_allowed(self, actor: User, action: str) -> None:
        if not can_perform(actor.role, action):
            raise PermissionDeniedError(action, actor.role)

    async def list_users(
        self,
        actor: User,
        *,
        role: str | None = None,
        search: str | None = None,
    ) -> list[User]:
        self.ensure_allowed(actor, "users.list")
        return await self.list(search=search, role=role)

    async def create_user(
        self,
        actor: User,
        form: UserCreate,
        refresh: dict[str, Any] | None = None,
    ) -> Mutation[User]:
        self.ensure_allowed(actor, "users.create")
        return await self.create(form, refresh)

    async def update_user(
        self,
        actor: User,
        user_id: RecordId,
        form: UserUpdate,
        refresh: dict[str, Any] | None = None,
    ) -> Mutation[User]:
        """Edit an account. Anyone may edit their own profile."""
        if str(actor.id) != str(user_id):
            self.ensure_allowed(actor, "users.update")
        payload = form.to_payload(partial=True)
        if not payload.get("password"):
            payload.pop("password", None)
        return await self.update_payload(user_id, payload, refresh)

    async def delete_user(
        self,
        actor: User,
        user_id: RecordId,
        refresh: dict[str, Any] | None = None,
    ) -> Mutation[User]:
        self.ensure_allowed(actor, "users.delete")
        return await self.delete(user_id, refresh)
