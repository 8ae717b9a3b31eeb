from .base import CamelModel, Form, Record, RecordId, RequiredText
from .mutation import BulkResult, Mutation
from .user import User, UserCreate, UserUpdate
from .customer import Customer, CustomerCreate, CustomerStatusChange, CustomerUpdate
from .client import (
    ClientInvoice,
    ClientInvoiceCreate,
    ClientInvoiceStatusChange,
    ClientInvoiceUpdate,
    ClientOverview,
    ClientProject,
    ClientProjectCreate,
    ClientProjectStatusChange,
    ClientProjectUpdate,
    ClientsSummary,
)
from .employee import (
    AdvancePayment,
    AdvancePaymentCreate,
    AdvancePaymentStatusChange,
    AdvancePaymentUpdate,
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    PayrollSummaryResponse,
    StaffSalary,
    StaffSalaryCreate,
    StaffSalaryUpdate,
    StaffShift,
    StaffShiftCreate,
    StaffShiftUpdate,
)
from .task import Task, TaskBoard, TaskColumn, TaskCreate, TaskStatusChange, TaskUpdate
from .business import (
    Business,
    BusinessCreate,
    BusinessDesign,
    BusinessDesignCreate,
    BusinessDesignUpdate,
    BusinessesSummary,
    BusinessSale,
    BusinessSaleCreate,
    BusinessTotals,
    BusinessUpdate,
    SalesTotalsResponse,
)
from .lead import (
    Lead,
    LeadActivity,
    LeadActivityCreate,
    LeadCreate,
    LeadImportRequest,
    LeadStatusChange,
    LeadSummary,
    LeadUpdate,
)
from .agency_incentive import (
    AgencyIncentive,
    AgencyIncentiveCreate,
    AgencyIncentiveStatusChange,
    AgencyIncentiveSummaryResponse,
    AgencyIncentiveUpdate,
)
from .agency_sale import (
    AgencySale,
    AgencySaleCreate,
    AgencySalesSummaryResponse,
    AgencySaleStatusChange,
    AgencySaleUpdate,
)
from .memo import CalendarDayResponse, Memo, MemoCreate, MemoUpdate, MonthGridResponse
from .seo_article import IndexingResult, SeoArticle, SeoArticleCreate, SeoArticleUpdate
from .notification import BulkNotificationCreate, Notification, NotificationCreate, UnreadCount
from .chat import (
    Attachment,
    ChatGroup,
    ChatGroupCreate,
    GroupMemberAdd,
    Message,
    MessageCreate,
    UnreadBySender,
    UnreadSummary,
)
from .ai import (
    AIChatRequest,
    AIChatResponse,
    AIRequestLogResponse,
    ChatTurn,
    GeneratedTask,
    QuizItem,
    SeoArticleDraft,
    SeoArticleGenerationRequest,
    StudyRequest,
    StudyResponse,
    TaskGenerationRequest,
    TaskGenerationResponse,
    TranslationRequest,
    TranslationResponse,
)
from .dashboard import (
    DashboardResponse,
    MenuItemResponse,
    NavigationResponse,
    QuickActionResponse,
    RoleResponse,
)

__all__ = [
    "CamelModel",
    "Form",
    "Record",
    "RecordId",
    "RequiredText",
    "BulkResult",
    "Mutation",
    "User",
    "UserCreate",
    "UserUpdate",
    "Customer",
    "CustomerCreate",
    "CustomerStatusChange",
    "CustomerUpdate",
    "ClientInvoice",
    "ClientInvoiceCreate",
    "ClientInvoiceStatusChange",
    "ClientInvoiceUpdate",
    "ClientOverview",
    "ClientProject",
    "ClientProjectCreate",
    "ClientProjectStatusChange",
    "ClientProjectUpdate",
    "ClientsSummary",
    "AdvancePayment",
    "AdvancePaymentCreate",
    "AdvancePaymentStatusChange",
    "AdvancePaymentUpdate",
    "Employee",
    "EmployeeCreate",
    "EmployeeUpdate",
    "PayrollSummaryResponse",
    "StaffSalary",
    "StaffSalaryCreate",
    "StaffSalaryUpdate",
    "StaffShift",
    "StaffShiftCreate",
    "StaffShiftUpdate",
    "Task",
    "TaskBoard",
    "TaskColumn",
    "TaskCreate",
    "TaskStatusChange",
    "TaskUpdate",
    "Business",
    "BusinessCreate",
    "BusinessDesign",
    "BusinessDesignCreate",
    "BusinessDesignUpdate",
    "BusinessesSummary",
    "BusinessSale",
    "BusinessSaleCreate",
    "BusinessTotals",
    "BusinessUpdate",
    "SalesTotalsResponse",
    "Lead",
    "LeadActivity",
    "LeadActivityCreate",
    "LeadCreate",
    "LeadImportRequest",
    "LeadStatusChange",
    "LeadSummary",
    "LeadUpdate",
    "AgencyIncentive",
    "AgencyIncentiveCreate",
    "AgencyIncentiveStatusChange",
    "AgencyIncentiveSummaryResponse",
    "AgencyIncentiveUpdate",
    "AgencySale",
    "AgencySaleCreate",
    "AgencySalesSummaryResponse",
    "AgencySaleStatusChange",
    "AgencySaleUpdate",
    "CalendarDayResponse",
    "Memo",
    "MemoCreate",
    "MemoUpdate",
    "MonthGridResponse",
    "IndexingResult",
    "SeoArticle",
    "SeoArticleCreate",
    "SeoArticleUpdate",
    "BulkNotificationCreate",
    "Notification",
    "NotificationCreate",
    "UnreadCount",
    "Attachment",
    "ChatGroup",
    "ChatGroupCreate",
    "GroupMemberAdd",
    "Message",
    "MessageCreate",
    "UnreadBySender",
    "UnreadSummary",
    "AIChatRequest",
    "AIChatResponse",
    "AIRequestLogResponse",
    "ChatTurn",
    "GeneratedTask",
    "QuizItem",
    "SeoArticleDraft",
    "SeoArticleGenerationRequest",
    "StudyRequest",
    "StudyResponse",
    "TaskGenerationRequest",
    "TaskGenerationResponse",
    "TranslationRequest",
    "TranslationResponse",
    "DashboardResponse",
    "MenuItemResponse",
    "NavigationResponse",
    "QuickActionResponse",
    "RoleResponse",
]
