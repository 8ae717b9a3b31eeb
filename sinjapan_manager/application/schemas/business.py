"""Pydantic DTOs for businesses, their sales ledger and business designs."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId, RequiredText

SaleType = Literal["revenue", "expense"]
BusinessStatus = Literal["active", "inactive", "planning"]


class Business(Record):
    name: str | None = None
    description: str | None = None
    url: str | None = None
    target_revenue: Decimal | None = None
    status: str | None = None


class BusinessCreate(Form):
    name: RequiredText
    description: str | None = None
    url: str | None = None
    target_revenue: Decimal | None = Field(default=None, ge=0)
    status: BusinessStatus = "active"


class BusinessUpdate(Form):
    name: RequiredText | None = None
    description: str | None = None
    url: str | None = None
    target_revenue: Decimal | None = Field(default=None, ge=0)
    status: BusinessStatus | None = None


class BusinessSale(Record):
    business_id: RecordId | None = None
    type: str | None = None
    amount: Decimal | None = None
    description: str | None = None
    sale_date: datetime | None = None
    created_by: RecordId | None = None


class BusinessSaleCreate(Form):
    """A revenue or expense entry for one business."""

    type: SaleType = "revenue"
    amount: Decimal = Field(..., ge=0)
    description: str | None = None
    sale_date: datetime | None = None


class SalesTotalsResponse(CamelModel):
    revenue: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")


class BusinessTotals(CamelModel):
    business: Business
    totals: SalesTotalsResponse
    target_revenue: Decimal | None = None
    achievement_rate: float | None = None  # percent of target reached


class BusinessesSummary(CamelModel):
    """Per-business totals and the overall figures for the financials view."""

    businesses: list[BusinessTotals] = Field(default_factory=list)
    totals: SalesTotalsResponse = Field(default_factory=SalesTotalsResponse)


class BusinessDesign(Record):
    business_id: RecordId | None = None
    purpose: str | None = None
    customer_problem: str | None = None
    solution: str | None = None
    alternatives: str | None = None
    numbers: str | None = None
    responsibility: str | None = None
    success_criteria: str | None = None
    operation_loop: str | None = None


class BusinessDesignCreate(Form):
    business_id: RecordId
    purpose: str | None = None
    customer_problem: str | None = None
    solution: str | None = None
    alternatives: str | None = None
    numbers: str | None = None
    responsibility: str | None = None
    success_criteria: str | None = None
    operation_loop: str | None = None


class BusinessDesignUpdate(Form):
    purpose: str | None = None
    customer_problem: str | None = None
    solution: str | None = None
    alternatives: str | None = None
    numbers: str | None = None
    responsibility: str | None = None
    success_criteria: str | None = None
    operation_loop: str | None = None
