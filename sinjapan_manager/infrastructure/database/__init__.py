from .base import Base
from .session import engine, async_session_factory
from .models import AIRequestLogModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "AIRequestLogModel",
]
