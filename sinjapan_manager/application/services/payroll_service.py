"""Application service for staff payroll: salaries, shifts and advance payments."""

import asyncio

from sinjapan_manager.application.schemas import (
    AdvancePayment,
    PayrollSummaryResponse,
    StaffSalary,
    StaffShift,
)
from sinjapan_manager.domain.entities.aggregates import summarize_payroll

from .resource_service import ResourceService


class PayrollService:
    """Groups the three payroll collections and their monthly summary."""

    def __init__(
        self,
        salaries: ResourceService[StaffSalary],
        shifts: ResourceService[StaffShift],
        advances: ResourceService[AdvancePayment],
    ):
        self.salaries = salaries
        self.shifts = shifts
        self.advances = advances

    async def summary(
        self,
        *,
        month: str | None = None,
        user_id: str | None = None,
    ) -> PayrollSummaryResponse:
        """Totals for ``month`` (``YYYY-MM``), optionally for one staff member."""
        salaries, shifts, advances = await asyncio.gather(
            self.salaries.list(user_id=user_id),
            self.shifts.list(user_id=user_id),
            self.advances.list(user_id=user_id),
        )
        figures = summarize_payroll(salaries, shifts, advances, month=month)
        return PayrollSummaryResponse.model_validate(figures)
