from .agency_incentive_service import AgencyIncentiveService
from .agency_sale_service import AgencySaleService
from .ai_service import AIService
from .ai_usage_logger import AIUsageLogger
from .business_service import BusinessService
from .chat_service import ChatService
from .client_service import ClientService
from .customer_service import CustomerService
from .dashboard_service import DashboardService
from .employee_service import EmployeeService
from .lead_service import LeadService
from .memo_service import MemoService
from .notification_service import NotificationService
from .payroll_service import PayrollService
from .polling import ChangeFeed, PollingFeed, sse_event
from .resource_service import ResourceService, matches_search
from .seo_article_service import SeoArticleService
from .task_service import TaskService
from .user_service import UserService

__all__ = [
    "AgencyIncentiveService",
    "AgencySaleService",
    "AIService",
    "AIUsageLogger",
    "BusinessService",
    "ChatService",
    "ClientService",
    "CustomerService",
    "DashboardService",
    "EmployeeService",
    "LeadService",
    "MemoService",
    "NotificationService",
    "PayrollService",
    "ChangeFeed",
    "PollingFeed",
    "sse_event",
    "ResourceService",
    "matches_search",
    "SeoArticleService",
    "TaskService",
    "UserService",
]
