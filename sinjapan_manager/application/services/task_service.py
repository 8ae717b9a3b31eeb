"""Application service for tasks and the status board."""

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import Task, TaskBoard, TaskColumn, TaskCreate
from sinjapan_manager.application.schemas.task import TASK_STATUSES

from .resource_service import ResourceService


class TaskService(ResourceService[Task]):
    """Tasks; the status filter is applied locally like the page does."""

    search_fields = ("title", "description")
    local_filters = ("status", "priority", "assigned_to")

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, Task, "Task")

    async def board(self, **filters) -> TaskBoard:
        """Group tasks into status columns in workflow order.

        Tasks with a status outside the known workflow get their own
        trailing column so nothing disappears from the board.
        """
        tasks = await self.list(**filters)
        grouped: dict[str, list[Task]] = {status: [] for status in TASK_STATUSES}
        for task in tasks:
            grouped.setdefault(task.status or "pending", []).append(task)
        return TaskBoard(
            columns=[
                TaskColumn(status=status, count=len(items), tasks=items)
                for status, items in grouped.items()
            ],
            total=len(tasks),
        )

    async def create_many(
        self, forms: list[TaskCreate], refresh: dict | None = None
    ) -> tuple[list[Task], list[Task]]:
        """Create several tasks, then re-fetch the list once."""
        created: list[Task] = []
        for form in forms:
            record = self.to_record(await self._repository.create(form.to_payload()))
            if record is not None:
                created.append(record)
        return created, await self.list(**(refresh or {}))
