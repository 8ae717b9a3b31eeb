"""Agency sales and commission endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sinjapan_manager.application.schemas import (
    AgencySale,
    AgencySaleCreate,
    AgencySalesSummaryResponse,
    AgencySaleStatusChange,
    AgencySaleUpdate,
    Mutation,
)
from sinjapan_manager.application.services import AgencySaleService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_agency_sale_service

router = APIRouter(prefix="/agency/sales", tags=["Agency sales"])


def sale_filters(
    agency_id: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
) -> dict:
    return {"agency_id": agency_id, "status": status_filter}


@router.get("", response_model=list[AgencySale])
async def list_sales(
    filters: dict = Depends(sale_filters),
    service: AgencySaleService = Depends(get_agency_sale_service),
) -> list[AgencySale]:
    return await service.list(**filters)


@router.get("/summary", response_model=AgencySalesSummaryResponse)
async def sales_summary(
    filters: dict = Depends(sale_filters),
    service: AgencySaleService = Depends(get_agency_sale_service),
) -> AgencySalesSummaryResponse:
    """Total sales, total commission and per-agency totals."""
    return await service.summary(**filters)


@router.post("", response_model=Mutation[AgencySale], status_code=status.HTTP_201_CREATED)
async def create_sale(
    data: AgencySaleCreate,
    filters: dict = Depends(sale_filters),
    service: AgencySaleService = Depends(get_agency_sale_service),
) -> Mutation[AgencySale]:
    return await service.create(data, filters)


@router.patch("/{sale_id}", response_model=Mutation[AgencySale])
async def update_sale(
    sale_id: str,
    data: AgencySaleUpdate,
    filters: dict = Depends(sale_filters),
    service: AgencySaleService = Depends(get_agency_sale_service),
) -> Mutation[AgencySale]:
    try:
        return await service.update(sale_id, data, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{sale_id}/status", response_model=Mutation[AgencySale])
async def change_sale_status(
    sale_id: str,
    data: AgencySaleStatusChange,
    filters: dict = Depends(sale_filters),
    service: AgencySaleService = Depends(get_agency_sale_service),
) -> Mutation[AgencySale]:
    """Approve, mark paid or cancel a sale."""
    try:
        return await service.change_status(sale_id, data.status, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{sale_id}", response_model=Mutation[AgencySale])
async def delete_sale(
    sale_id: str,
    filters: dict = Depends(sale_filters),
    service: AgencySaleService = Depends(get_agency_sale_service),
) -> Mutation[AgencySale]:
    try:
        return await service.delete(sale_id, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
