"""Unit tests for the memo month grid."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from sinjapan_manager.application.schemas import Memo
from sinjapan_manager.domain.entities.calendar import (
    WEEKDAY_LABELS,
    memo_day,
    month_bounds,
    month_grid,
)

TOKYO = ZoneInfo("Asia/Tokyo")


def test_grid_starts_on_sunday_and_covers_whole_weeks():
    grid = month_grid(2026, 10, [], TOKYO, today=date(2026, 10, 18))

    assert grid.weekdays == WEEKDAY_LABELS
    assert WEEKDAY_LABELS[0] == "日"
    assert all(len(week) == 7 for week in grid.weeks)
    first = grid.weeks[0][0]
    assert first.date == date(2026, 9, 27)
    assert first.in_month is False
    assert grid.weeks[-1][-1].date == date(2026, 10, 31)


def test_today_is_flagged():
    grid = month_grid(2026, 10, [], TOKYO, today=date(2026, 10, 18))
    flagged = [day.date for week in grid.weeks for day in week if day.is_today]
    assert flagged == [date(2026, 10, 18)]


def test_memos_attach_to_their_local_day():
    late_utc = Memo(id=1, date=datetime(2026, 10, 14, 16, 0, tzinfo=timezone.utc), content="締め切り")
    grid = month_grid(2026, 10, [late_utc], TOKYO, today=date(2026, 10, 1))

    days = {day.date: day for week in grid.weeks for day in week}
    assert days[date(2026, 10, 15)].memos == [late_utc]
    assert days[date(2026, 10, 14)].memos == []


def test_memo_day_parses_strings():
    assert memo_day("2026-10-14T16:00:00Z", TOKYO) == date(2026, 10, 15)
    assert memo_day("2026-10-14", TOKYO) == date(2026, 10, 14)
    assert memo_day("garbage", TOKYO) is None
    assert memo_day(None, TOKYO) is None


def test_month_bounds():
    start, end = month_bounds(2026, 2, TOKYO)
    assert start == datetime(2026, 2, 1, tzinfo=TOKYO)
    assert end.date() == date(2026, 2, 28)
    assert end.tzinfo is TOKYO
