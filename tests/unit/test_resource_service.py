"""Unit tests for the re-fetch-after-mutation ResourceService and its page subclasses."""

import typing

import pytest
from pydantic import ValidationError

from sinjapan_manager.application.schemas import (
    AgencyIncentiveCreate,
    BusinessDesign,
    CustomerCreate,
    CustomerUpdate,
    TaskCreate,
)
from sinjapan_manager.application.services import (
    AgencyIncentiveService,
    CustomerService,
    ResourceService,
    TaskService,
    matches_search,
)
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeResourceRepository

CUSTOMERS = [
    {"id": 1, "companyName": "ABC株式会社", "contactName": "山田", "email": "yamada@abc.jp", "status": "active"},
    {"id": 2, "companyName": "Sakura Trading", "contactName": "Sato", "email": "sato@sakura.jp", "status": "prospect"},
]


@pytest.fixture
def repo() -> FakeResourceRepository:
    return FakeResourceRepository(CUSTOMERS)


@pytest.fixture
def service(repo: FakeResourceRepository) -> CustomerService:
    return CustomerService(repo)


@pytest.mark.asyncio
async def test_list_maps_camel_case_records(service: CustomerService):
    customers = await service.list()
    assert [c.company_name for c in customers] == ["ABC株式会社", "Sakura Trading"]


@pytest.mark.asyncio
async def test_search_is_local_and_case_insensitive(service: CustomerService, repo):
    result = await service.list(search="SAKURA")
    assert [c.id for c in result] == [2]
    # local search is not forwarded upstream
    assert repo.calls_of("list") == [("list", None)]


@pytest.mark.asyncio
async def test_create_returns_item_and_refetched_list(service: CustomerService, repo):
    mutation = await service.create(CustomerCreate(company_name="  New Co  ", email=None))

    assert mutation.item is not None
    assert mutation.item.company_name == "New Co"
    assert len(mutation.items) == 3
    payload = repo.calls_of("create")[0][1]
    assert payload == {"companyName": "New Co", "status": "active"}


@pytest.mark.asyncio
async def test_create_refetches_with_callers_filters(service: CustomerService):
    mutation = await service.create(CustomerCreate(company_name="Zeta"), {"search": "abc"})
    assert [c.id for c in mutation.items] == [1]


def test_blank_company_name_is_rejected():
    with pytest.raises(ValueError):
        CustomerCreate(company_name="   ")


@pytest.mark.asyncio
async def test_update_sends_only_fields_that_were_set(service: CustomerService, repo):
    mutation = await service.update(1, CustomerUpdate(phone="03-0000-0000", notes=None))

    assert repo.calls_of("update")[0][2] == {"phone": "03-0000-0000", "notes": None}
    assert mutation.item.phone == "03-0000-0000"
    assert mutation.item.company_name == "ABC株式会社"


@pytest.mark.asyncio
async def test_change_status_sends_only_status(service: CustomerService, repo):
    await service.change_status(2, "active")
    assert repo.calls_of("update")[0] == ("update", 2, {"status": "active"})


@pytest.mark.asyncio
async def test_missing_records_raise_not_found(service: CustomerService):
    with pytest.raises(EntityNotFoundError):
        await service.get(99)
    with pytest.raises(EntityNotFoundError):
        await service.update(99, CustomerUpdate(phone="1"))
    with pytest.raises(EntityNotFoundError):
        await service.delete(99)


@pytest.mark.asyncio
async def test_delete_returns_refetched_list(service: CustomerService):
    mutation = await service.delete(1)
    assert mutation.item is None
    assert [c.id for c in mutation.items] == [2]


@pytest.mark.asyncio
async def test_malformed_rows_are_skipped():
    repo = FakeResourceRepository([{"id": 1, "companyName": "ok"}])
    repo.rows["bad"] = {"id": {"nested": True}}
    repo.rows["no-id"] = {"companyName": "missing id"}
    customers = await CustomerService(repo).list()
    assert [c.id for c in customers] == [1]


@pytest.mark.asyncio
async def test_upstream_filters_are_camel_cased():
    repo = FakeResourceRepository([{"id": 1, "businessId": 3, "purpose": "x"}])
    service = ResourceService(repo, BusinessDesign)
    await service.list(business_id=3, empty=None)
    assert repo.calls_of("list") == [("list", {"businessId": 3})]


@pytest.mark.asyncio
async def test_search_without_local_fields_goes_upstream():
    repo = FakeResourceRepository([])
    await ResourceService(repo, BusinessDesign).list(search="retail")
    assert repo.calls_of("list") == [("list", {"search": "retail"})]


def test_matches_search_follows_dotted_names():
    class Holder:
        class user:
            name = "Suzuki Ichiro"
        employee_number = "E-001"

    assert matches_search(Holder, "ichiro", ("user.name",))
    assert matches_search(Holder, "e-00", ("user.email", "employee_number"))
    assert not matches_search(Holder, "tanaka", ("user.name",))
    assert matches_search(Holder, "  ", ("user.name",))


# ── Tasks ──

TASKS = [
    {"id": 1, "title": "見積書作成", "status": "pending", "priority": "high", "assignedTo": 4},
    {"id": 2, "title": "請求書送付", "status": "completed", "priority": "low", "assignedTo": 5},
    {"id": 3, "title": "Call client", "status": "in_progress", "priority": "high", "assignedTo": 4},
    {"id": 4, "title": "Archive", "status": "archived", "priority": "low"},
]


@pytest.mark.asyncio
async def test_task_filters_are_local():
    repo = FakeResourceRepository(TASKS)
    tasks = await TaskService(repo).list(status="pending", priority="high", assigned_to="4")
    assert [t.id for t in tasks] == [1]
    assert repo.calls_of("list") == [("list", None)]


@pytest.mark.asyncio
async def test_task_board_columns_in_workflow_order():
    board = await TaskService(FakeResourceRepository(TASKS)).board()

    assert [c.status for c in board.columns] == ["pending", "in_progress", "completed", "archived"]
    assert [c.count for c in board.columns] == [1, 1, 1, 1]
    assert board.total == 4


@pytest.mark.asyncio
async def test_create_many_refetches_once():
    repo = FakeResourceRepository(TASKS)
    created, items = await TaskService(repo).create_many(
        [TaskCreate(title="A"), TaskCreate(title="B")]
    )
    assert [t.title for t in created] == ["A", "B"]
    assert len(items) == 6
    assert len(repo.calls_of("list")) == 1


def test_method_annotations_resolve_despite_list_method():
    # a method named ``list`` must not shadow the builtin in later annotations
    for cls in (ResourceService, AgencyIncentiveService, FakeResourceRepository):
        for name in ("list", "to_records", "refreshed", "fetch"):
            method = getattr(cls, name, None)
            if method is not None:
                typing.get_type_hints(method)


INCENTIVES = [
    {"id": 1, "projectName": "春の新規獲得", "incentiveType": "percentage", "incentiveValue": "10", "status": "active"},
    {"id": 2, "projectName": "法人限定", "incentiveValue": "5000", "incentiveType": "fixed", "targetAgencyId": 7,
     "status": "active"},
    {"id": 3, "projectName": "旧キャンペーン", "incentiveValue": "3", "targetAgencyId": 8, "status": "ended"},
    {"id": 4, "projectName": "保留中", "incentiveValue": "2", "status": "inactive"},
]


@pytest.mark.asyncio
async def test_incentives_for_agency_include_untargeted_ones():
    service = AgencyIncentiveService(FakeResourceRepository(INCENTIVES))

    assert [i.id for i in await service.list(agency_id="7")] == [1, 2, 4]
    assert [i.id for i in await service.list(agency_id=8)] == [1, 3, 4]
    assert len(await service.list()) == 4


@pytest.mark.asyncio
async def test_incentive_summary_counts_active_only():
    summary = await AgencyIncentiveService(FakeResourceRepository(INCENTIVES)).summary("7")
    assert (summary.total, summary.active) == (3, 2)


@pytest.mark.asyncio
async def test_incentive_create_defaults_and_refetch_for_agency():
    repo = FakeResourceRepository(INCENTIVES)
    service = AgencyIncentiveService(repo)

    result = await service.create(
        AgencyIncentiveCreate(project_name="夏季", incentive_value="15"), {"agency_id": "8"}
    )

    assert repo.calls_of("create")[0][1] == {
        "projectName": "夏季",
        "incentiveValue": "15",
        "incentiveType": "percentage",
        "status": "active",
    }
    assert result.item.id == 5
    assert [i.id for i in result.items] == [1, 3, 4, 5]
    assert repo.calls_of("list")[0][1] is None


def test_incentive_requires_project_name_and_value():
    with pytest.raises(ValidationError):
        AgencyIncentiveCreate(project_name=" ", incentive_value="10")
    with pytest.raises(ValidationError):
        AgencyIncentiveCreate(project_name="案件")
