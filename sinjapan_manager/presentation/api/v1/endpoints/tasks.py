"""Task endpoints: list, status board, CRUD and AI task generation."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sinjapan_manager.application.schemas import (
    Mutation,
    Task,
    TaskBoard,
    TaskCreate,
    TaskGenerationRequest,
    TaskGenerationResponse,
    TaskStatusChange,
    TaskUpdate,
    User,
)
from sinjapan_manager.application.services import AIService, TaskService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import (
    get_ai_service,
    get_current_user,
    get_task_service,
)

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=list[Task])
async def list_tasks(
    status_filter: str | None = Query(None, alias="status"),
    priority: str | None = None,
    assigned_to: str | None = None,
    search: str | None = None,
    service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return await service.list(
        search=search,
        status=status_filter,
        priority=priority,
        assigned_to=assigned_to,
    )


@router.get("/board", response_model=TaskBoard)
async def task_board(
    assigned_to: str | None = None,
    search: str | None = None,
    service: TaskService = Depends(get_task_service),
) -> TaskBoard:
    """Tasks grouped by status column."""
    return await service.board(search=search, assigned_to=assigned_to)


@router.post("", response_model=Mutation[Task], status_code=status.HTTP_201_CREATED)
async def create_task(
    data: TaskCreate,
    status_filter: str | None = Query(None, alias="status"),
    service: TaskService = Depends(get_task_service),
) -> Mutation[Task]:
    return await service.create(data, {"status": status_filter})


@router.post("/generate", response_model=TaskGenerationResponse)
async def generate_tasks(
    data: TaskGenerationRequest,
    user: User = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
) -> TaskGenerationResponse:
    """Break a goal into tasks with AI; ``create`` also registers them."""
    return await service.generate_tasks(data, user_id=str(user.id))


@router.patch("/{task_id}", response_model=Mutation[Task])
async def update_task(
    task_id: str,
    data: TaskUpdate,
    status_filter: str | None = Query(None, alias="status"),
    service: TaskService = Depends(get_task_service),
) -> Mutation[Task]:
    try:
        return await service.update(task_id, data, {"status": status_filter})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{task_id}/status", response_model=Mutation[Task])
async def change_task_status(
    task_id: str,
    data: TaskStatusChange,
    status_filter: str | None = Query(None, alias="status"),
    service: TaskService = Depends(get_task_service),
) -> Mutation[Task]:
    """Move a task to another column."""
    try:
        return await service.change_status(task_id, data.status, {"status": status_filter})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{task_id}", response_model=Mutation[Task])
async def delete_task(
    task_id: str,
    status_filter: str | None = Query(None, alias="status"),
    service: TaskService = Depends(get_task_service),
) -> Mutation[Task]:
    try:
        return await service.delete(task_id, {"status": status_filter})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
