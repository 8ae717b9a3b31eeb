"""Pydantic DTOs for the Task feature."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId, RequiredText

TaskStatus = Literal["pending", "in_progress", "completed"]
TaskPriority = Literal["low", "medium", "high"]

TASK_STATUSES: tuple[str, ...] = ("pending", "in_progress", "completed")


class Task(Record):
    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    category: str | None = None
    business_id: RecordId | None = None
    due_date: datetime | None = None
    assigned_to: RecordId | None = None
    created_by: RecordId | None = None
    customer_id: RecordId | None = None


class TaskCreate(Form):
    """Schema for creating a task: only the title is required."""

    title: RequiredText
    description: str | None = None
    status: TaskStatus = "pending"
    priority: TaskPriority = "medium"
    category: str | None = None
    business_id: RecordId | None = None
    due_date: datetime | None = None
    assigned_to: RecordId | None = None
    customer_id: RecordId | None = None


class TaskUpdate(Form):
    title: RequiredText | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    category: str | None = None
    business_id: RecordId | None = None
    due_date: datetime | None = None
    assigned_to: RecordId | None = None
    customer_id: RecordId | None = None


class TaskStatusChange(Form):
    status: TaskStatus


class TaskColumn(CamelModel):
    status: str
    count: int
    tasks: list[Task] = Field(default_factory=list)


class TaskBoard(CamelModel):
    """Tasks grouped into status columns, in workflow order."""

    columns: list[TaskColumn] = Field(default_factory=list)
    total: int = 0
