"""Pydantic DTOs for sales leads, lead activities and CSV import."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId, RequiredText

LeadStatus = Literal["new", "contacted", "interested", "negotiating", "converted", "lost"]
LeadSource = Literal["meo", "instagram", "twitter", "facebook", "website", "referral", "other", "csv"]

LEAD_STATUSES: tuple[str, ...] = ("new", "contacted", "interested", "negotiating", "converted", "lost")


class Lead(Record):
    name: str | None = None
    company: str | None = None
    title: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    address: str | None = None
    category: str | None = None
    source: str | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    facebook_url: str | None = None
    line_id: str | None = None
    google_maps_url: str | None = None
    status: str | None = None
    notes: str | None = None
    score: int | None = None
    last_contacted_at: datetime | None = None
    assigned_to: RecordId | None = None

class LeadCreate(Form):
    """Schema for registering a lead: only the name is required."""

    name: RequiredText
    company: str | None = None
    title: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    address: str | None = None
    category: str | None = None
    source: LeadSource | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    facebook_url: str | None = None
    line_id: str | None = None
    google_maps_url: str | None = None
    status: LeadStatus = "new"
    notes: str | None = None
    score: int | None = Field(default=None, ge=0, le=100)
    assigned_to: RecordId | None = None

class LeadUpdate(Form):
    name: RequiredText | None = None
    company: str | None = None
    title: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    address: str | None = None
    category: str | None = None
    source: LeadSource | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    facebook_url: str | None = None
    line_id: str | None = None
    google_maps_url: str | None = None
    status: LeadStatus | None = None
    notes: str | None = None
    score: int | None = Field(default=None, ge=0, le=100)
    assigned_to: RecordId | None = None


class LeadStatusChange(Form):
    status: LeadStatus


class LeadActivity(Record):
    lead_id: RecordId | None = None
    type: str | None = None
    description: str | None = None
    user_id: RecordId | None = None


class LeadActivityCreate(Form):
    type: RequiredText  # "call" | "email" | "dm" | "meeting" | "note"
    description: str | None = None


class LeadImportRequest(CamelModel):
    """Pasted CSV text: a header row followed by one lead per line."""

    csv_text: str = Field(..., examples=["名前,会社,電話\n山田太郎,ABC株式会社,03-1234-5678"])


class LeadSummary(CamelModel):
    total: int = 0
    by_status: dict[str, int] = Field(default_factory=dict)
    by_source: dict[str, int] = Field(default_factory=dict)
