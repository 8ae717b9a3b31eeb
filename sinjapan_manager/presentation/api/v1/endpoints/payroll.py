"""Staff payroll endpoints: salaries, shifts, advance payments and the monthly summary."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sinjapan_manager.application.schemas import (
    AdvancePayment,
    AdvancePaymentCreate,
    AdvancePaymentStatusChange,
    AdvancePaymentUpdate,
    Mutation,
    PayrollSummaryResponse,
    StaffSalary,
    StaffSalaryCreate,
    StaffSalaryUpdate,
    StaffShift,
    StaffShiftCreate,
    StaffShiftUpdate,
)
from sinjapan_manager.application.services import PayrollService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_payroll_service

router = APIRouter(tags=["Payroll"])


@router.get("/payroll/summary", response_model=PayrollSummaryResponse)
async def payroll_summary(
    month: str | None = Query(None, pattern=r"^\d{4}-\d{2}$"),
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> PayrollSummaryResponse:
    """Salary, shift-hour and advance totals for a month (``YYYY-MM``)."""
    return await service.summary(month=month, user_id=user_id)


# ── Salaries ──


@router.get("/staff-salaries", response_model=list[StaffSalary])
async def list_salaries(
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> list[StaffSalary]:
    return await service.salaries.list(user_id=user_id)


@router.post("/staff-salaries", response_model=Mutation[StaffSalary], status_code=status.HTTP_201_CREATED)
async def create_salary(
    data: StaffSalaryCreate,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[StaffSalary]:
    return await service.salaries.create(data, {"user_id": user_id})


@router.patch("/staff-salaries/{salary_id}", response_model=Mutation[StaffSalary])
async def update_salary(
    salary_id: str,
    data: StaffSalaryUpdate,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[StaffSalary]:
    try:
        return await service.salaries.update(salary_id, data, {"user_id": user_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/staff-salaries/{salary_id}", response_model=Mutation[StaffSalary])
async def delete_salary(
    salary_id: str,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[StaffSalary]:
    try:
        return await service.salaries.delete(salary_id, {"user_id": user_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ── Shifts ──


@router.get("/staff-shifts", response_model=list[StaffShift])
async def list_shifts(
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> list[StaffShift]:
    return await service.shifts.list(user_id=user_id)


@router.post("/staff-shifts", response_model=Mutation[StaffShift], status_code=status.HTTP_201_CREATED)
async def create_shift(
    data: StaffShiftCreate,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[StaffShift]:
    return await service.shifts.create(data, {"user_id": user_id})


@router.patch("/staff-shifts/{shift_id}", response_model=Mutation[StaffShift])
async def update_shift(
    shift_id: str,
    data: StaffShiftUpdate,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[StaffShift]:
    try:
        return await service.shifts.update(shift_id, data, {"user_id": user_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/staff-shifts/{shift_id}", response_model=Mutation[StaffShift])
async def delete_shift(
    shift_id: str,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[StaffShift]:
    try:
        return await service.shifts.delete(shift_id, {"user_id": user_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ── Advance payments ──


@router.get("/advance-payments", response_model=list[AdvancePayment])
async def list_advances(
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> list[AdvancePayment]:
    return await service.advances.list(user_id=user_id)


@router.post(
    "/advance-payments",
    response_model=Mutation[AdvancePayment],
    status_code=status.HTTP_201_CREATED,
)
async def request_advance(
    data: AdvancePaymentCreate,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[AdvancePayment]:
    return await service.advances.create(data, {"user_id": user_id})


@router.patch("/advance-payments/{advance_id}", response_model=Mutation[AdvancePayment])
async def update_advance(
    advance_id: str,
    data: AdvancePaymentUpdate,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[AdvancePayment]:
    try:
        return await service.advances.update(advance_id, data, {"user_id": user_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/advance-payments/{advance_id}/status", response_model=Mutation[AdvancePayment])
async def change_advance_status(
    advance_id: str,
    data: AdvancePaymentStatusChange,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[AdvancePayment]:
    """Approve, reject or mark an advance as paid."""
    try:
        return await service.advances.change_status(advance_id, data.status, {"user_id": user_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/advance-payments/{advance_id}", response_model=Mutation[AdvancePayment])
async def delete_advance(
    advance_id: str,
    user_id: str | None = None,
    service: PayrollService = Depends(get_payroll_service),
) -> Mutation[AdvancePayment]:
    try:
        return await service.advances.delete(advance_id, {"user_id": user_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
