"""Employee record endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from sinjapan_manager.application.schemas import (
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    Mutation,
    User,
)
from sinjapan_manager.application.services import EmployeeService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_current_user, get_employee_service

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=list[Employee])
async def list_employees(
    search: str | None = None,
    actor: User = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
) -> list[Employee]:
    return await service.list_employees(actor, search=search)


@router.post("", response_model=Mutation[Employee], status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeCreate,
    search: str | None = None,
    service: EmployeeService = Depends(get_employee_service),
) -> Mutation[Employee]:
    return await service.create(data, {"search": search})


@router.patch("/{employee_id}", response_model=Mutation[Employee])
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    search: str | None = None,
    service: EmployeeService = Depends(get_employee_service),
) -> Mutation[Employee]:
    try:
        return await service.update(employee_id, data, {"search": search})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
