"""Month grid for the memo calendar (weeks start on Sunday)."""

import calendar as _calendar
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, time, tzinfo
from typing import Any

WEEKDAY_LABELS = ("日", "月", "火", "水", "木", "金", "土")

_SUNDAY_FIRST = _calendar.Calendar(firstweekday=_calendar.SUNDAY)


@dataclass
class CalendarDay:
    date: date
    in_month: bool
    is_today: bool
    memos: list[Any] = field(default_factory=list)


@dataclass
class MonthGrid:
    year: int
    month: int
    weekdays: Sequence[str]
    weeks: list[list[CalendarDay]]


def month_bounds(year: int, month: int, tz: tzinfo) -> tuple[datetime, datetime]:
    """First and last instant of ``year``/``month`` in ``tz``."""
    first = date(year, month, 1)
    last = date(year, month, _calendar.monthrange(year, month)[1])
    start = datetime.combine(first, time.min, tzinfo=tz)
    end = datetime.combine(last, time.max, tzinfo=tz)
    return start, end


def memo_day(value: Any, tz: tzinfo) -> date | None:
    """The calendar day a memo falls on in ``tz``."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(tz).date()
    if isinstance(value, date):
        return value
    text = str(value)
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return memo_day(parsed, tz)


def month_grid(
    year: int,
    month: int,
    memos: Iterable[Any],
    tz: tzinfo,
    *,
    today: date | None = None,
) -> MonthGrid:
    """Build whole Sunday-first weeks covering the month, memos attached per day."""
    if today is None:
        today = datetime.now(tz).date()

    by_day: dict[date, list[Any]] = {}
    for memo in memos:
        day = memo_day(getattr(memo, "date", None), tz)
        if day is not None:
            by_day.setdefault(day, []).append(memo)

    weeks = [
        [
            CalendarDay(
                date=day,
                in_month=day.month == month,
                is_today=day == today,
                memos=by_day.get(day, []),
            )
            for day in week
        ]
        for week in _SUNDAY_FIRST.monthdatescalendar(year, month)
    ]
    return MonthGrid(year=year, month=month, weekdays=WEEKDAY_LABELS, weeks=weeks)
