"""Business endpoints: CRUD, sales ledger, totals and the financial summary."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status

from sinjapan_manager.application.schemas import (
    Business,
    BusinessCreate,
    BusinessesSummary,
    BusinessSale,
    BusinessSaleCreate,
    BusinessUpdate,
    Mutation,
    SalesTotalsResponse,
)
from sinjapan_manager.application.services import BusinessService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_business_service

router = APIRouter(prefix="/businesses", tags=["Businesses"])


@router.get("", response_model=list[Business])
async def list_businesses(
    service: BusinessService = Depends(get_business_service),
) -> list[Business]:
    return await service.list()


@router.get("/summary", response_model=BusinessesSummary)
async def businesses_summary(
    service: BusinessService = Depends(get_business_service),
) -> BusinessesSummary:
    """Every business with revenue, expenses, profit and target achievement."""
    return await service.summary()


@router.post("", response_model=Mutation[Business], status_code=status.HTTP_201_CREATED)
async def create_business(
    data: BusinessCreate,
    service: BusinessService = Depends(get_business_service),
) -> Mutation[Business]:
    return await service.create(data)


@router.patch("/{business_id}", response_model=Mutation[Business])
async def update_business(
    business_id: str,
    data: BusinessUpdate,
    service: BusinessService = Depends(get_business_service),
) -> Mutation[Business]:
    try:
        return await service.update(business_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{business_id}", response_model=Mutation[Business])
async def delete_business(
    business_id: str,
    service: BusinessService = Depends(get_business_service),
) -> Mutation[Business]:
    try:
        return await service.delete(business_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{business_id}/sales", response_model=list[BusinessSale])
async def list_sales(
    business_id: str,
    start: datetime | None = None,
    end: datetime | None = None,
    service: BusinessService = Depends(get_business_service),
) -> list[BusinessSale]:
    """Revenue and expense entries, optionally within ``start``..``end``."""
    return await service.sales(business_id, start=start, end=end)


@router.post(
    "/{business_id}/sales",
    response_model=Mutation[BusinessSale],
    status_code=status.HTTP_201_CREATED,
)
async def add_sale(
    business_id: str,
    data: BusinessSaleCreate,
    service: BusinessService = Depends(get_business_service),
) -> Mutation[BusinessSale]:
    return await service.add_sale(business_id, data)


@router.get("/{business_id}/totals", response_model=SalesTotalsResponse)
async def business_totals(
    business_id: str,
    start: datetime | None = None,
    end: datetime | None = None,
    service: BusinessService = Depends(get_business_service),
) -> SalesTotalsResponse:
    """All-time totals from the backend, or ledger totals for a period."""
    try:
        if start is not None or end is not None:
            return await service.period_totals(business_id, start=start, end=end)
        return await service.totals(business_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
