"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from sinjapan_manager.presentation.api.v1.endpoints.health import router as health_router
from sinjapan_manager.presentation.api.v1.endpoints.navigation import router as navigation_router
from sinjapan_manager.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from sinjapan_manager.presentation.api.v1.endpoints.users import router as users_router
from sinjapan_manager.presentation.api.v1.endpoints.customers import router as customers_router
from sinjapan_manager.presentation.api.v1.endpoints.clients import router as clients_router
from sinjapan_manager.presentation.api.v1.endpoints.employees import router as employees_router
from sinjapan_manager.presentation.api.v1.endpoints.payroll import router as payroll_router
from sinjapan_manager.presentation.api.v1.endpoints.tasks import router as tasks_router
from sinjapan_manager.presentation.api.v1.endpoints.businesses import router as businesses_router
from sinjapan_manager.presentation.api.v1.endpoints.business_designs import (
    router as business_designs_router,
)
from sinjapan_manager.presentation.api.v1.endpoints.leads import router as leads_router
from sinjapan_manager.presentation.api.v1.endpoints.agency_sales import router as agency_sales_router
from sinjapan_manager.presentation.api.v1.endpoints.agency_incentives import (
    router as agency_incentives_router,
)
from sinjapan_manager.presentation.api.v1.endpoints.memos import router as memos_router
from sinjapan_manager.presentation.api.v1.endpoints.seo_articles import router as seo_articles_router
from sinjapan_manager.presentation.api.v1.endpoints.notifications import (
    router as notifications_router,
)
from sinjapan_manager.presentation.api.v1.endpoints.chat import router as chat_router
from sinjapan_manager.presentation.api.v1.endpoints.ai import router as ai_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(navigation_router)
router.include_router(dashboard_router)
router.include_router(users_router)
router.include_router(customers_router)
router.include_router(clients_router)
router.include_router(employees_router)
router.include_router(payroll_router)
router.include_router(tasks_router)
router.include_router(businesses_router)
router.include_router(business_designs_router)
router.include_router(leads_router)
router.include_router(agency_sales_router)
router.include_router(agency_incentives_router)
router.include_router(memos_router)
router.include_router(seo_articles_router)
router.include_router(notifications_router)
router.include_router(chat_router)
router.include_router(ai_router)
