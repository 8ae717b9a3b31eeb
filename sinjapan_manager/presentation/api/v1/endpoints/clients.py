"""Client management endpoints: client accounts, projects and invoices."""

from fastapi import APIRouter, Depends, HTTPException, status

from sinjapan_manager.application.schemas import (
    ClientInvoice,
    ClientInvoiceCreate,
    ClientInvoiceStatusChange,
    ClientInvoiceUpdate,
    ClientProject,
    ClientProjectCreate,
    ClientProjectStatusChange,
    ClientProjectUpdate,
    ClientsSummary,
    Mutation,
    User,
)
from sinjapan_manager.application.services import ClientService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import get_client_service, get_current_user

router = APIRouter(tags=["Clients"])


@router.get("/clients", response_model=ClientsSummary)
async def list_clients(
    search: str | None = None,
    actor: User = Depends(get_current_user),
    service: ClientService = Depends(get_client_service),
) -> ClientsSummary:
    """Client accounts with their projects, invoices and billing figures."""
    return await service.summary(actor, search=search)


# ── Projects ──


@router.get("/client-projects", response_model=list[ClientProject])
async def list_projects(
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> list[ClientProject]:
    return await service.projects.list(client_id=client_id)


@router.post(
    "/client-projects",
    response_model=Mutation[ClientProject],
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    data: ClientProjectCreate,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientProject]:
    return await service.projects.create(data, {"client_id": client_id})


@router.patch("/client-projects/{project_id}", response_model=Mutation[ClientProject])
async def update_project(
    project_id: str,
    data: ClientProjectUpdate,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientProject]:
    try:
        return await service.projects.update(project_id, data, {"client_id": client_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/client-projects/{project_id}/status", response_model=Mutation[ClientProject])
async def change_project_status(
    project_id: str,
    data: ClientProjectStatusChange,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientProject]:
    try:
        return await service.projects.change_status(project_id, data.status, {"client_id": client_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/client-projects/{project_id}", response_model=Mutation[ClientProject])
async def delete_project(
    project_id: str,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientProject]:
    try:
        return await service.projects.delete(project_id, {"client_id": client_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ── Invoices ──


@router.get("/client-invoices", response_model=list[ClientInvoice])
async def list_invoices(
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> list[ClientInvoice]:
    return await service.invoices.list(client_id=client_id)


@router.post(
    "/client-invoices",
    response_model=Mutation[ClientInvoice],
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    data: ClientInvoiceCreate,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientInvoice]:
    return await service.invoices.create(data, {"client_id": client_id})


@router.patch("/client-invoices/{invoice_id}", response_model=Mutation[ClientInvoice])
async def update_invoice(
    invoice_id: str,
    data: ClientInvoiceUpdate,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientInvoice]:
    try:
        return await service.invoices.update(invoice_id, data, {"client_id": client_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/client-invoices/{invoice_id}/status", response_model=Mutation[ClientInvoice])
async def change_invoice_status(
    invoice_id: str,
    data: ClientInvoiceStatusChange,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientInvoice]:
    """Mark an invoice paid / overdue / pending."""
    try:
        return await service.invoices.change_status(invoice_id, data.status, {"client_id": client_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/client-invoices/{invoice_id}", response_model=Mutation[ClientInvoice])
async def delete_invoice(
    invoice_id: str,
    client_id: str | None = None,
    service: ClientService = Depends(get_client_service),
) -> Mutation[ClientInvoice]:
    try:
        return await service.invoices.delete(invoice_id, {"client_id": client_id})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
