"""Application service for the clients page: accounts, projects and invoices."""

import asyncio

from sinjapan_manager.application.schemas import (
    ClientInvoice,
    ClientOverview,
    ClientProject,
    ClientsSummary,
    User,
)
from sinjapan_manager.domain.entities.aggregates import ZERO, filter_by, summarize_client
from sinjapan_manager.domain.entities.role import Role

from .resource_service import ResourceService, matches_search
from .user_service import UserService


class ClientService:
    """Joins client accounts with their projects and invoices."""

    def __init__(
        self,
        users: UserService,
        projects: ResourceService[ClientProject],
        invoices: ResourceService[ClientInvoice],
    ):
        self._users = users
        self._projects = projects
        self._invoices = invoices

    @property
    def projects(self) -> ResourceService[ClientProject]:
        return self._projects

    @property
    def invoices(self) -> ResourceService[ClientInvoice]:
        return self._invoices

    async def summary(self, actor: User, *, search: str | None = None) -> ClientsSummary:
        clients, projects, invoices = await asyncio.gather(
            self._users.list_users(actor, role=Role.CLIENT.value),
            self._projects.list(),
            self._invoices.list(),
        )

        overviews = []
        for client in clients:
            if not matches_search(client, search, ("name", "email", "company_id")):
                continue
            figures = summarize_client(client.id, projects, invoices)
            overviews.append(
                ClientOverview(
                    client=client,
                    projects=[p for p in projects if str(p.client_id) == str(client.id)],
                    invoices=[i for i in invoices if str(i.client_id) == str(client.id)],
                    total_billed=figures.total_billed,
                    pending_amount=figures.pending_amount,
                    active_projects=figures.active_projects,
                )
            )

        return ClientsSummary(
            clients=overviews,
            active_projects=len(filter_by(projects, "status", "active")),
            completed_projects=len(filter_by(projects, "status", "completed")),
            pending_invoices=len(filter_by(invoices, "status", "pending")),
            total_billed=sum((o.total_billed for o in overviews), ZERO),
            pending_amount=sum((o.pending_amount for o in overviews), ZERO),
        )
