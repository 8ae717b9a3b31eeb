from .ai_request_log import AIRequestLogModel

__all__ = [
    "AIRequestLogModel",
]
