"""Pydantic DTOs for agency incentive campaigns."""

from datetime import datetime
from typing import Literal

from .base import CamelModel, Form, Record, RecordId, RequiredText

IncentiveType = Literal["percentage", "fixed"]
IncentiveStatus = Literal["active", "inactive", "ended"]


class AgencyIncentive(Record):
    project_name: str | None = None
    description: str | None = None
    incentive_type: str | None = None
    # kept as text: "10" means 10% or ¥10 depending on incentive_type
    incentive_value: str | None = None
    target_agency_id: RecordId | None = None
    status: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class AgencyIncentiveCreate(Form):
    """A campaign; without ``target_agency_id`` it applies to every agency."""

    project_name: RequiredText
    incentive_value: RequiredText
    incentive_type: IncentiveType = "percentage"
    status: IncentiveStatus = "active"
    description: str | None = None
    target_agency_id: RecordId | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class AgencyIncentiveUpdate(Form):
    project_name: RequiredText | None = None
    incentive_value: RequiredText | None = None
    incentive_type: IncentiveType | None = None
    status: IncentiveStatus | None = None
    description: str | None = None
    target_agency_id: RecordId | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class AgencyIncentiveStatusChange(Form):
    status: IncentiveStatus


class AgencyIncentiveSummaryResponse(CamelModel):
    total: int = 0
    active: int = 0
