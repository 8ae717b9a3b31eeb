from .ai_request_log_repository import SQLAlchemyAIRequestLogRepository

__all__ = [
    "SQLAlchemyAIRequestLogRepository",
]
