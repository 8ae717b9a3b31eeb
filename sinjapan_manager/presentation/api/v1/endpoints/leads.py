"""Sales lead endpoints: CRUD, CSV import and contact activity log."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sinjapan_manager.application.schemas import (
    BulkResult,
    Lead,
    LeadActivity,
    LeadActivityCreate,
    LeadCreate,
    LeadImportRequest,
    LeadStatusChange,
    LeadSummary,
    LeadUpdate,
    Mutation,
)
from sinjapan_manager.application.services import LeadService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_lead_service

router = APIRouter(prefix="/leads", tags=["Leads"])


def lead_filters(
    search: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
    source: str | None = None,
) -> dict:
    """The lead page's current filters, reused to re-fetch after a mutation."""
    return {"search": search, "status": status_filter, "source": source}


@router.get("", response_model=list[Lead])
async def list_leads(
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> list[Lead]:
    return await service.list(**filters)


@router.get("/summary", response_model=LeadSummary)
async def leads_summary(
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> LeadSummary:
    """Lead counts by status and by source."""
    return await service.summary(**filters)


@router.post("", response_model=Mutation[Lead], status_code=status.HTTP_201_CREATED)
async def create_lead(
    data: LeadCreate,
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> Mutation[Lead]:
    return await service.create(data, filters)


@router.post("/import", response_model=BulkResult[Lead], status_code=status.HTTP_201_CREATED)
async def import_leads(
    data: LeadImportRequest,
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> BulkResult[Lead]:
    """Register leads from pasted CSV (header row + one lead per line)."""
    return await service.import_csv(data.csv_text, filters)


@router.put("/{lead_id}", response_model=Mutation[Lead])
async def update_lead(
    lead_id: str,
    data: LeadUpdate,
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> Mutation[Lead]:
    try:
        return await service.update(lead_id, data, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{lead_id}/status", response_model=Mutation[Lead])
async def change_lead_status(
    lead_id: str,
    data: LeadStatusChange,
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> Mutation[Lead]:
    try:
        return await service.change_status(lead_id, data.status, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{lead_id}", response_model=Mutation[Lead])
async def delete_lead(
    lead_id: str,
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> Mutation[Lead]:
    try:
        return await service.delete(lead_id, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{lead_id}/activities", response_model=list[LeadActivity])
async def list_activities(
    lead_id: str,
    service: LeadService = Depends(get_lead_service),
) -> list[LeadActivity]:
    return await service.activities(lead_id)


@router.post(
    "/{lead_id}/activities",
    response_model=Mutation[Lead],
    status_code=status.HTTP_201_CREATED,
)
async def log_activity(
    lead_id: str,
    data: LeadActivityCreate,
    filters: dict = Depends(lead_filters),
    service: LeadService = Depends(get_lead_service),
) -> Mutation[Lead]:
    """Record a call, email, DM or meeting with the lead."""
    return await service.log_activity(lead_id, data, filters)
