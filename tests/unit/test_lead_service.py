"""Unit tests for LeadService: CSV import, activities and summary."""

import pytest

from sinjapan_manager.application.schemas import LeadActivityCreate
from sinjapan_manager.application.services import LeadService
from sinjapan_manager.domain.exceptions import LeadImportError
from tests.fakes import FakeResourceRepository

LEADS = [
    {"id": 1, "name": "山田太郎", "status": "new", "source": "web"},
    {"id": 2, "name": "Sato", "status": "contacted", "source": "csv"},
    {"id": 3, "name": "Kato", "status": "new", "source": "csv"},
]


@pytest.mark.asyncio
async def test_import_posts_all_rows_in_one_bulk_request():
    repo = FakeResourceRepository(LEADS, {("POST", "bulk"): {"count": 2}})
    result = await LeadService(repo).import_csv("名前,会社\n田中,A社\n鈴木,B社")

    posts = repo.calls_of("post")
    assert len(posts) == 1
    assert posts[0][1] == "bulk"
    assert posts[0][2] == {
        "leads": [
            {"source": "csv", "name": "田中", "company": "A社"},
            {"source": "csv", "name": "鈴木", "company": "B社"},
        ]
    }
    assert result.count == 2
    assert len(result.items) == 3


@pytest.mark.asyncio
async def test_import_count_falls_back_to_parsed_rows():
    repo = FakeResourceRepository([], {("POST", "bulk"): None})
    result = await LeadService(repo).import_csv("name\nA\nB\nC")
    assert result.count == 3


@pytest.mark.asyncio
async def test_invalid_csv_never_reaches_backend():
    repo = FakeResourceRepository(LEADS)
    with pytest.raises(LeadImportError):
        await LeadService(repo).import_csv("name")
    assert repo.calls == []


@pytest.mark.asyncio
async def test_filters_go_upstream():
    repo = FakeResourceRepository(LEADS)
    await LeadService(repo).list(search="yama", status="new", source=None)
    assert repo.calls_of("list") == [("list", {"status": "new", "search": "yama"})]


@pytest.mark.asyncio
async def test_log_activity_then_refetch():
    repo = FakeResourceRepository(LEADS)
    mutation = await LeadService(repo).log_activity(
        2, LeadActivityCreate(type="call", description="不在")
    )
    assert repo.calls_of("post") == [
        ("post", "2/activities", {"type": "call", "description": "不在"})
    ]
    assert mutation.item is None
    assert len(mutation.items) == 3


@pytest.mark.asyncio
async def test_activities_are_validated():
    repo = FakeResourceRepository(
        LEADS,
        {("GET", "1/activities"): [{"id": 9, "leadId": 1, "type": "email"}, "junk"]},
    )
    activities = await LeadService(repo).activities(1)
    assert [(a.id, a.type) for a in activities] == [(9, "email")]


@pytest.mark.asyncio
async def test_summary_counts_by_status_and_source():
    summary = await LeadService(FakeResourceRepository(LEADS)).summary()
    assert summary.total == 3
    assert summary.by_status == {"new": 2, "contacted": 1}
    assert summary.by_source == {"web": 1, "csv": 2}
