"""Pydantic DTOs for client accounts, their projects and invoices."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId, RequiredText
from .user import User

ProjectStatus = Literal["active", "completed", "on_hold"]
InvoiceStatus = Literal["pending", "paid", "overdue"]


class ClientProject(Record):
    client_id: RecordId | None = None
    name: str | None = None
    description: str | None = None
    status: str | None = None
    budget: Decimal | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class ClientProjectCreate(Form):
    client_id: RecordId
    name: RequiredText
    description: str | None = None
    status: ProjectStatus = "active"
    budget: Decimal | None = Field(default=None, ge=0)
    start_date: datetime | None = None
    end_date: datetime | None = None


class ClientProjectUpdate(Form):
    name: RequiredText | None = None
    description: str | None = None
    status: ProjectStatus | None = None
    budget: Decimal | None = Field(default=None, ge=0)
    start_date: datetime | None = None
    end_date: datetime | None = None


class ClientProjectStatusChange(Form):
    status: ProjectStatus


class ClientInvoice(Record):
    client_id: RecordId | None = None
    invoice_number: str | None = None
    amount: Decimal | None = None
    status: str | None = None
    due_date: datetime | None = None
    paid_date: datetime | None = None
    notes: str | None = None


class ClientInvoiceCreate(Form):
    client_id: RecordId
    invoice_number: RequiredText
    amount: Decimal = Field(..., ge=0)
    due_date: datetime
    status: InvoiceStatus = "pending"
    paid_date: datetime | None = None
    notes: str | None = None


class ClientInvoiceUpdate(Form):
    invoice_number: RequiredText | None = None
    amount: Decimal | None = Field(default=None, ge=0)
    due_date: datetime | None = None
    status: InvoiceStatus | None = None
    paid_date: datetime | None = None
    notes: str | None = None


class ClientInvoiceStatusChange(Form):
    status: InvoiceStatus


class ClientOverview(CamelModel):
    """A client account with its projects, invoices and billing figures."""

    client: User
    projects: list[ClientProject] = Field(default_factory=list)
    invoices: list[ClientInvoice] = Field(default_factory=list)
    total_billed: Decimal = Decimal("0")
    pending_amount: Decimal = Decimal("0")
    active_projects: int = 0


class ClientsSummary(CamelModel):
    """The clients page: one overview per client plus overall counts."""

    clients: list[ClientOverview] = Field(default_factory=list)
    active_projects: int = 0
    completed_projects: int = 0
    pending_invoices: int = 0
    total_billed: Decimal = Decimal("0")
    pending_amount: Decimal = Decimal("0")
