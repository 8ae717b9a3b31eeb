"""Application service for employee records."""

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import Employee, User
from sinjapan_manager.domain.entities.navigation import can_perform
from sinjapan_manager.domain.exceptions import PermissionDeniedError

from .resource_service import ResourceService


class EmployeeService(ResourceService[Employee]):
    search_fields = ("user.name", "user.email", "employee_number")

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, Employee, "Employee")

    async def list_employees(self, actor: User, *, search: str | None = None) -> list[Employee]:
        """Employee list; management roles only."""
        if not can_perform(actor.role, "employees.list"):
            raise PermissionDeniedError("employees.list", actor.role)
        return await self.list(search=search)
