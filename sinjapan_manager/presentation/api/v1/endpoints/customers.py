"""Customer CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from sinjapan_manager.application.schemas import (
    Customer,
    CustomerCreate,
    CustomerStatusChange,
    CustomerUpdate,
    Mutation,
)
from sinjapan_manager.application.services import CustomerService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_customer_service

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=list[Customer])
async def list_customers(
    search: str | None = None,
    service: CustomerService = Depends(get_customer_service),
) -> list[Customer]:
    """Customers matching ``search`` on company, contact or email."""
    return await service.list(search=search)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    try:
        return await service.get(customer_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=Mutation[Customer], status_code=status.HTTP_201_CREATED)
async def create_customer(
    data: CustomerCreate,
    search: str | None = None,
    service: CustomerService = Depends(get_customer_service),
) -> Mutation[Customer]:
    """Create a customer and return the re-fetched list."""
    return await service.create(data, {"search": search})


@router.patch("/{customer_id}", response_model=Mutation[Customer])
async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    search: str | None = None,
    service: CustomerService = Depends(get_customer_service),
) -> Mutation[Customer]:
    try:
        return await service.update(customer_id, data, {"search": search})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{customer_id}/status", response_model=Mutation[Customer])
async def change_customer_status(
    customer_id: str,
    data: CustomerStatusChange,
    search: str | None = None,
    service: CustomerService = Depends(get_customer_service),
) -> Mutation[Customer]:
    try:
        return await service.change_status(customer_id, data.status, {"search": search})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{customer_id}", response_model=Mutation[Customer])
async def delete_customer(
    customer_id: str,
    search: str | None = None,
    service: CustomerService = Depends(get_customer_service),
) -> Mutation[Customer]:
    try:
        return await service.delete(customer_id, {"search": search})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
