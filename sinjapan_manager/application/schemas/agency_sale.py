"""Pydantic DTOs for agency sales and commissions."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId

AgencySaleStatus = Literal["pending", "approved", "paid", "rejected"]


class AgencySale(Record):
    agency_id: RecordId | None = None
    business_id: RecordId | None = None
    customer_id: RecordId | None = None
    client_name: str | None = None
    project_name: str | None = None
    amount: Decimal | None = None
    commission: Decimal | None = None
    status: str | None = None
    description: str | None = None
    sale_date: datetime | None = None


class AgencySaleCreate(Form):
    amount: Decimal = Field(..., ge=0)
    commission: Decimal | None = Field(default=None, ge=0)
    business_id: RecordId | None = None
    customer_id: RecordId | None = None
    client_name: str | None = None
    project_name: str | None = None
    description: str | None = None
    sale_date: datetime | None = None


class AgencySaleUpdate(Form):
    amount: Decimal | None = Field(default=None, ge=0)
    commission: Decimal | None = Field(default=None, ge=0)
    business_id: RecordId | None = None
    customer_id: RecordId | None = None
    client_name: str | None = None
    project_name: str | None = None
    description: str | None = None
    status: AgencySaleStatus | None = None
    sale_date: datetime | None = None


class AgencySaleStatusChange(Form):
    status: AgencySaleStatus


class AgencySalesSummaryResponse(CamelModel):
    total_sales: Decimal = Decimal("0")
    total_commission: Decimal = Decimal("0")
    approved_count: int = 0
    sale_count: int = 0
    by_agency: dict[str, Decimal] = Field(default_factory=dict)

    model_config = {"from_attributes": True}
