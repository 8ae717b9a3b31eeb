"""Agency incentive campaign endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sinjapan_manager.application.schemas import (
    AgencyIncentive,
    AgencyIncentiveCreate,
    AgencyIncentiveStatusChange,
    AgencyIncentiveSummaryResponse,
    AgencyIncentiveUpdate,
    Mutation,
)
from sinjapan_manager.application.services import AgencyIncentiveService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_agency_incentive_service

router = APIRouter(prefix="/agency/incentives", tags=["Agency incentives"])


def incentive_filters(
    agency_id: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
    search: str | None = None,
) -> dict:
    return {"agency_id": agency_id, "status": status_filter, "search": search}


@router.get("", response_model=list[AgencyIncentive])
async def list_incentives(
    filters: dict = Depends(incentive_filters),
    service: AgencyIncentiveService = Depends(get_agency_incentive_service),
) -> list[AgencyIncentive]:
    """Campaigns; with ``agency_id`` only those that agency is eligible for."""
    return await service.list(**filters)


@router.get("/summary", response_model=AgencyIncentiveSummaryResponse)
async def incentive_summary(
    agency_id: str | None = None,
    service: AgencyIncentiveService = Depends(get_agency_incentive_service),
) -> AgencyIncentiveSummaryResponse:
    return await service.summary(agency_id)


@router.post("", response_model=Mutation[AgencyIncentive], status_code=status.HTTP_201_CREATED)
async def create_incentive(
    data: AgencyIncentiveCreate,
    filters: dict = Depends(incentive_filters),
    service: AgencyIncentiveService = Depends(get_agency_incentive_service),
) -> Mutation[AgencyIncentive]:
    return await service.create(data, filters)


@router.patch("/{incentive_id}", response_model=Mutation[AgencyIncentive])
async def update_incentive(
    incentive_id: str,
    data: AgencyIncentiveUpdate,
    filters: dict = Depends(incentive_filters),
    service: AgencyIncentiveService = Depends(get_agency_incentive_service),
) -> Mutation[AgencyIncentive]:
    try:
        return await service.update(incentive_id, data, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{incentive_id}/status", response_model=Mutation[AgencyIncentive])
async def change_incentive_status(
    incentive_id: str,
    data: AgencyIncentiveStatusChange,
    filters: dict = Depends(incentive_filters),
    service: AgencyIncentiveService = Depends(get_agency_incentive_service),
) -> Mutation[AgencyIncentive]:
    """Pause, resume or end a campaign."""
    try:
        return await service.change_status(incentive_id, data.status, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{incentive_id}", response_model=Mutation[AgencyIncentive])
async def delete_incentive(
    incentive_id: str,
    filters: dict = Depends(incentive_filters),
    service: AgencyIncentiveService = Depends(get_agency_incentive_service),
) -> Mutation[AgencyIncentive]:
    try:
        return await service.delete(incentive_id, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
