"""Pydantic DTOs for calendar memos and the month grid."""

import datetime as dt

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId, RequiredText


class Memo(Record):
    date: dt.datetime | None = None
    content: str | None = None
    color: str | None = None
    user_id: RecordId | None = None


class MemoCreate(Form):
    date: dt.datetime
    content: RequiredText
    color: str = "blue"


class MemoUpdate(Form):
    date: dt.datetime | None = None
    content: RequiredText | None = None
    color: str | None = None


class CalendarDayResponse(CamelModel):
    date: dt.date
    in_month: bool
    is_today: bool
    memos: list[Memo] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class MonthGridResponse(CamelModel):
    """Whole weeks (Sunday first) covering one month."""

    year: int
    month: int
    weekdays: list[str]
    weeks: list[list[CalendarDayResponse]]

    model_config = {"from_attributes": True}
