"""Unit tests for BusinessService sales filtering."""

from datetime import datetime, timedelta, timezone

import pytest

from sinjapan_manager.application.services import BusinessService
from tests.fakes import FakeResourceRepository

JST = timezone(timedelta(hours=9))


@pytest.mark.asyncio
async def test_sales_period_is_compared_in_utc():
    repo = FakeResourceRepository(
        responses={
            ("GET", "4/sales"): [
                {"id": 1, "type": "revenue", "amount": "100", "saleDate": "2025-12-31T16:00:00Z"},
                {"id": 2, "type": "revenue", "amount": "200", "saleDate": "2026-01-15T03:00:00Z"},
                {"id": 3, "type": "expense", "amount": "50", "saleDate": "2026-01-31T16:00:00Z"},
            ]
        }
    )
    service = BusinessService(repo)

    sales = await service.sales(
        4,
        start=datetime(2026, 1, 1, tzinfo=JST),
        end=datetime(2026, 1, 31, 23, 59, 59, tzinfo=JST),
    )

    assert [s.id for s in sales] == [1, 2]


@pytest.mark.asyncio
async def test_sales_without_period_returns_everything():
    repo = FakeResourceRepository(responses={("GET", "4/sales"): [{"id": 1, "saleDate": None}]})
    assert [s.id for s in await BusinessService(repo).sales(4)] == [1]
