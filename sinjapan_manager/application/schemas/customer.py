"""Pydantic DTOs for the Customer feature."""

from typing import Literal

from .base import Form, Record, RecordId, RequiredText

CustomerStatus = Literal["active", "inactive", "prospect"]


class Customer(Record):
    company_name: str | None = None
    contact_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    status: str | None = None
    assigned_to: RecordId | None = None
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    notes: str | None = None


class CustomerCreate(Form):
    """Schema for registering a customer: the company name is required."""

    company_name: RequiredText
    contact_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    status: CustomerStatus = "active"
    assigned_to: RecordId | None = None
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    notes: str | None = None


class CustomerUpdate(Form):
    company_name: RequiredText | None = None
    contact_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    status: CustomerStatus | None = None
    assigned_to: RecordId | None = None
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    notes: str | None = None


class CustomerStatusChange(Form):
    status: CustomerStatus
