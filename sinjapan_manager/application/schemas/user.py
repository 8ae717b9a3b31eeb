"""Pydantic DTOs for users (staff, agencies and client accounts)."""

from typing import Literal

from pydantic import Field

from .base import Form, Record, RequiredText

UserRole = Literal["admin", "ceo", "manager", "staff", "agency", "client"]


class User(Record):
    email: str | None = None
    name: str | None = None
    role: str | None = None
    company_id: str | None = None
    avatar_url: str | None = None
    phone: str | None = None
    department: str | None = None
    position: str | None = None
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    is_active: bool | None = None
    # never echoed back to the browser
    password: str | None = Field(default=None, exclude=True)


class UserCreate(Form):
    """Schema for creating a user account."""

    name: RequiredText
    email: RequiredText
    password: RequiredText
    role: UserRole = "staff"
    phone: str | None = None
    department: str | None = None
    position: str | None = None
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None


class UserUpdate(Form):
    """Schema for editing a user: all fields optional; a blank password is ignored."""

    name: RequiredText | None = None
    email: RequiredText | None = None
    password: str | None = None
    role: UserRole | None = None
    phone: str | None = None
    department: str | None = None
    position: str | None = None
    avatar_url: str | None = None
    bank_name: str | None = None
    bank_branch: str | None = None
    bank_account_type: str | None = None
    bank_account_number: str | None = None
    bank_account_holder: str | None = None
    is_active: bool | None = None
