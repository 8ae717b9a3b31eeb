"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from sinjapan_manager.application.interfaces import AIGenerator, AIRequestLogRepository
from sinjapan_manager.application.schemas import (
    AdvancePayment,
    BusinessDesign,
    ClientInvoice,
    ClientProject,
    StaffSalary,
    StaffShift,
    User,
)
from sinjapan_manager.application.services import (
    AgencyIncentiveService,
    AgencySaleService,
    AIService,
    AIUsageLogger,
    BusinessService,
    ChatService,
    ClientService,
    CustomerService,
    DashboardService,
    EmployeeService,
    LeadService,
    MemoService,
    NotificationService,
    PayrollService,
    ResourceService,
    SeoArticleService,
    TaskService,
    UserService,
)
from sinjapan_manager.config import get_settings
from sinjapan_manager.infrastructure.backend import (
    BackendAIGenerator,
    BackendClient,
    HttpResourceRepository,
)
from sinjapan_manager.infrastructure.database.repositories import SQLAlchemyAIRequestLogRepository
from sinjapan_manager.infrastructure.database.session import async_session_factory
from sinjapan_manager.infrastructure.llm import OpenRouterAIGenerator
from sinjapan_manager.infrastructure.openrouter import OpenRouterClient


# ── Upstream backend ──


async def get_backend_client(request: Request) -> AsyncGenerator[BackendClient, None]:
    """Provides a BackendClient that forwards the caller's session headers.

    Shares the application-wide httpx pool created in the lifespan.
    """
    settings = get_settings()
    forwarded = {
        name: request.headers[name]
        for name in settings.forwarded_headers
        if name in request.headers
    }
    yield BackendClient(
        base_url=settings.backend_base_url,
        forward_headers=forwarded,
        http_client=getattr(request.app.state, "backend_http_client", None),
        timeout=settings.backend_timeout,
    )


async def get_current_user(client: BackendClient = Depends(get_backend_client)) -> User:
    """The signed-in user, as the backend sees the forwarded session.

    A 401 from the backend propagates unchanged.
    """
    data = await HttpResourceRepository(client, "/api/auth").fetch("me")
    return User.model_validate(data)


# ── Page services ──


def get_customer_service(client: BackendClient = Depends(get_backend_client)) -> CustomerService:
    return CustomerService(HttpResourceRepository(client, "/api/customers"))


def get_user_service(client: BackendClient = Depends(get_backend_client)) -> UserService:
    return UserService(HttpResourceRepository(client, "/api/users"))


def get_client_service(
    client: BackendClient = Depends(get_backend_client),
    users: UserService = Depends(get_user_service),
) -> ClientService:
    """Provides the clients page service: accounts, projects and invoices."""
    return ClientService(
        users=users,
        projects=ResourceService(
            HttpResourceRepository(client, "/api/client-projects"), ClientProject
        ),
        invoices=ResourceService(
            HttpResourceRepository(client, "/api/client-invoices"), ClientInvoice
        ),
    )


def get_employee_service(client: BackendClient = Depends(get_backend_client)) -> EmployeeService:
    return EmployeeService(HttpResourceRepository(client, "/api/employees"))


def get_payroll_service(client: BackendClient = Depends(get_backend_client)) -> PayrollService:
    return PayrollService(
        salaries=ResourceService(HttpResourceRepository(client, "/api/staff-salaries"), StaffSalary),
        shifts=ResourceService(HttpResourceRepository(client, "/api/staff-shifts"), StaffShift),
        advances=ResourceService(
            HttpResourceRepository(client, "/api/advance-payments"), AdvancePayment
        ),
    )


def get_task_service(client: BackendClient = Depends(get_backend_client)) -> TaskService:
    return TaskService(HttpResourceRepository(client, "/api/tasks"))


def get_business_service(client: BackendClient = Depends(get_backend_client)) -> BusinessService:
    return BusinessService(HttpResourceRepository(client, "/api/businesses"))


def get_business_design_service(
    client: BackendClient = Depends(get_backend_client),
) -> ResourceService[BusinessDesign]:
    return ResourceService(HttpResourceRepository(client, "/api/business-designs"), BusinessDesign)


def get_lead_service(client: BackendClient = Depends(get_backend_client)) -> LeadService:
    return LeadService(HttpResourceRepository(client, "/api/leads", update_method="PUT"))


def get_agency_incentive_service(
    client: BackendClient = Depends(get_backend_client),
) -> AgencyIncentiveService:
    return AgencyIncentiveService(HttpResourceRepository(client, "/api/agency/incentives"))


def get_agency_sale_service(
    client: BackendClient = Depends(get_backend_client),
) -> AgencySaleService:
    return AgencySaleService(HttpResourceRepository(client, "/api/agency/sales"))


def get_memo_service(client: BackendClient = Depends(get_backend_client)) -> MemoService:
    return MemoService(HttpResourceRepository(client, "/api/memos"), get_settings().timezone)


def get_seo_article_service(
    client: BackendClient = Depends(get_backend_client),
) -> SeoArticleService:
    return SeoArticleService(HttpResourceRepository(client, "/api/seo-articles"))


def get_notification_service(
    client: BackendClient = Depends(get_backend_client),
) -> NotificationService:
    return NotificationService(HttpResourceRepository(client, "/api/notifications"))


def get_chat_service(client: BackendClient = Depends(get_backend_client)) -> ChatService:
    settings = get_settings()
    return ChatService(
        HttpResourceRepository(client, "/api/chat"),
        max_upload_bytes=settings.max_upload_size_mb * 1024 * 1024,
    )


def get_dashboard_service(client: BackendClient = Depends(get_backend_client)) -> DashboardService:
    return DashboardService(HttpResourceRepository(client, "/api/dashboard"), get_settings().timezone)


# ── AI ──


def get_ai_generator(
    request: Request,
    client: BackendClient = Depends(get_backend_client),
) -> AIGenerator:
    """Selects the AI generator from ``AI_PROVIDER`` ("backend" or "openrouter")."""
    settings = get_settings()
    if settings.ai_provider.lower() == "openrouter":
        provider = OpenRouterClient(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            app_name=settings.openrouter_app_name,
            http_client=getattr(request.app.state, "ai_http_client", None),
        )
        return OpenRouterAIGenerator(
            provider,
            model=settings.ai_model,
            temperature=settings.ai_temperature,
        )
    return BackendAIGenerator(client)


def get_ai_log_repository() -> AIRequestLogRepository:
    """Provides the AI request log store; every write is committed on its own."""
    return SQLAlchemyAIRequestLogRepository(async_session_factory)


async def get_ai_service(
    log_repository: AIRequestLogRepository = Depends(get_ai_log_repository),
    generator: AIGenerator = Depends(get_ai_generator),
    tasks: TaskService = Depends(get_task_service),
) -> AsyncGenerator[AIService, None]:
    """Provides an AIService with request logging wired to the database."""
    usage_logger = AIUsageLogger(log_repository)
    yield AIService(
        generator=generator,
        log_repository=log_repository,
        usage_logger=usage_logger,
        tasks=tasks,
    )
