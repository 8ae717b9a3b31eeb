"""Pydantic DTOs for employees and payroll (salaries, shifts, advance payments)."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import Field, StringConstraints

from .base import CamelModel, Form, Record, RecordId
from .user import User

AdvanceStatus = Literal["pending", "approved", "rejected", "paid"]
YearMonth = Annotated[str, StringConstraints(pattern=r"^\d{4}-(0[1-9]|1[0-2])$")]
ClockTime = Annotated[str, StringConstraints(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]


class Employee(Record):
    user_id: RecordId | None = None
    employee_number: str | None = None
    hire_date: datetime | None = None
    salary: Decimal | None = None
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    notes: str | None = None
    user: User | None = None  # joined account, when the backend embeds it


class EmployeeCreate(Form):
    user_id: RecordId
    employee_number: str | None = None
    hire_date: datetime | None = None
    salary: Decimal | None = Field(default=None, ge=0)
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    notes: str | None = None


class EmployeeUpdate(Form):
    employee_number: str | None = None
    hire_date: datetime | None = None
    salary: Decimal | None = Field(default=None, ge=0)
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    notes: str | None = None


# ── Payroll ──


class StaffSalary(Record):
    user_id: RecordId | None = None
    month: str | None = None  # "YYYY-MM"
    base_salary: Decimal | None = None
    allowances: Decimal | None = None
    deductions: Decimal | None = None
    net_salary: Decimal | None = None
    paid_at: datetime | None = None
    notes: str | None = None


class StaffSalaryCreate(Form):
    user_id: RecordId
    month: YearMonth
    base_salary: Decimal = Field(..., ge=0)
    allowances: Decimal | None = Field(default=None, ge=0)
    deductions: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None


class StaffSalaryUpdate(Form):
    month: YearMonth | None = None
    base_salary: Decimal | None = Field(default=None, ge=0)
    allowances: Decimal | None = Field(default=None, ge=0)
    deductions: Decimal | None = Field(default=None, ge=0)
    paid_at: datetime | None = None
    notes: str | None = None


class StaffShift(Record):
    user_id: RecordId | None = None
    date: str | None = None  # "YYYY-MM-DD"
    start_time: str | None = None  # "HH:MM"
    end_time: str | None = None
    break_minutes: int | None = None
    notes: str | None = None


class StaffShiftCreate(Form):
    user_id: RecordId
    date: Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")]
    start_time: ClockTime
    end_time: ClockTime
    break_minutes: int | None = Field(default=None, ge=0)
    notes: str | None = None


class StaffShiftUpdate(Form):
    date: Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")] | None = None
    start_time: ClockTime | None = None
    end_time: ClockTime | None = None
    break_minutes: int | None = Field(default=None, ge=0)
    notes: str | None = None


class AdvancePayment(Record):
    user_id: RecordId | None = None
    amount: Decimal | None = None
    reason: str | None = None
    status: str | None = None
    request_date: datetime | None = None
    approved_by: RecordId | None = None
    paid_at: datetime | None = None


class AdvancePaymentCreate(Form):
    user_id: RecordId
    amount: Decimal = Field(..., gt=0)
    reason: str | None = None


class AdvancePaymentUpdate(Form):
    amount: Decimal | None = Field(default=None, gt=0)
    reason: str | None = None
    status: AdvanceStatus | None = None


class AdvancePaymentStatusChange(Form):
    status: AdvanceStatus


class PayrollSummaryResponse(CamelModel):
    """Monthly payroll figures for the staff page."""

    month: str | None = None
    salary_count: int = 0
    total_base_salary: Decimal = Decimal("0")
    total_allowances: Decimal = Decimal("0")
    total_deductions: Decimal = Decimal("0")
    total_net_salary: Decimal = Decimal("0")
    shift_count: int = 0
    shift_hours: Decimal = Decimal("0")
    advance_pending: Decimal = Decimal("0")
    advance_approved: Decimal = Decimal("0")

    model_config = {"from_attributes": True}
