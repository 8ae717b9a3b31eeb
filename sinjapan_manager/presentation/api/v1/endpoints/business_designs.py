"""Business design sheet endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from sinjapan_manager.application.schemas import (
    BusinessDesign,
    BusinessDesignCreate,
    BusinessDesignUpdate,
    Mutation,
)
from sinjapan_manager.application.services import ResourceService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_business_design_service

router = APIRouter(prefix="/business-designs", tags=["Business designs"])


@router.get("", response_model=list[BusinessDesign])
async def list_designs(
    business_id: str | None = None,
    service: ResourceService[BusinessDesign] = Depends(get_business_design_service),
) -> list[BusinessDesign]:
    return await service.list(business_id=business_id)


@router.post("", response_model=Mutation[BusinessDesign], status_code=status.HTTP_201_CREATED)
async def create_design(
    data: BusinessDesignCreate,
    business_id: str | None = None,
    service: ResourceService[BusinessDesign] = Depends(get_business_design_service),
) -> Mutation[BusinessDesign]:
    return await service.create(data, {"business_id": business_id})


@router.patch("/{design_id}", response_model=Mutation[BusinessDesign])
async def update_design(
    design_id: str,
    data: BusinessDesignUpdate,
    business_id: str | None = None,
    service: ResourceService[BusinessDesign] = Depends(get_business_design_service),
) -> Mutation[BusinessDesign]:
    try:
        return await service.update(design_id, data, {"business_id": business_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{design_id}", response_model=Mutation[BusinessDesign])
async def delete_design(
    design_id: str,
    business_id: str | None = None,
    service: ResourceService[BusinessDesign] = Depends(get_business_design_service),
) -> Mutation[BusinessDesign]:
    try:
        return await service.delete(design_id, {"business_id": business_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
