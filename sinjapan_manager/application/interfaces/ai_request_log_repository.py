"""Abstract repository interface for AI request logs."""

from abc import ABC, abstractmethod

from sinjapan_manager.domain.entities import AIRequestLog


class AIRequestLogRepository(ABC):
    """Port: defines persistence operations for AI request logs."""

    @abstractmethod
    async def create(self, log: AIRequestLog) -> AIRequestLog:
        """Persist a new log entry and return it with its assigned ID."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        feature: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[AIRequestLog]:
        """Retrieve logs, most recent first."""
        ...
