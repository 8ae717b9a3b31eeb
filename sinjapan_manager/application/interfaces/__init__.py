from .ai_generator import AIGenerator
from .ai_request_log_repository import AIRequestLogRepository
from .completion_provider import CompletionProvider
from .resource_repository import JSONDict, ResourceRepository

__all__ = [
    "AIGenerator",
    "AIRequestLogRepository",
    "CompletionProvider",
    "JSONDict",
    "ResourceRepository",
]
