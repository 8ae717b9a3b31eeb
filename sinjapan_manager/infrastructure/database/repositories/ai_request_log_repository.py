"""Concrete repository for AI request logs backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sinjapan_manager.application.interfaces import AIRequestLogRepository
from sinjapan_manager.domain.entities import AIRequestLog
from sinjapan_manager.infrastructure.database.models import AIRequestLogModel


class SQLAlchemyAIRequestLogRepository(AIRequestLogRepository):
    """Implements the AIRequestLogRepository port using SQLAlchemy.

    Each write commits in its own session, so a log row survives the
    failure of the request that produced it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: AIRequestLogModel) -> AIRequestLog:
        """Map ORM model → domain entity."""
        return AIRequestLog(
            id=model.id,
            feature=model.feature,
            provider=model.provider,
            model=model.model,
            prompt_tokens=model.prompt_tokens,
            completion_tokens=model.completion_tokens,
            total_tokens=model.total_tokens,
            cost=model.cost,
            duration_ms=model.duration_ms,
            status=model.status,
            error_message=model.error_message,
            request_context=model.request_context,
            user_id=model.user_id,
            created_at=model.created_at,
        )

    def _to_model(self, entity: AIRequestLog) -> AIRequestLogModel:
        """Map domain entity → ORM model."""
        return AIRequestLogModel(
            feature=entity.feature,
            provider=entity.provider,
            model=entity.model,
            prompt_tokens=entity.prompt_tokens,
            completion_tokens=entity.completion_tokens,
            total_tokens=entity.total_tokens,
            cost=entity.cost,
            duration_ms=entity.duration_ms,
            status=entity.status,
            error_message=entity.error_message,
            request_context=entity.request_context,
            user_id=entity.user_id,
            created_at=entity.created_at,
        )

    async def create(self, log: AIRequestLog) -> AIRequestLog:
        model = self._to_model(log)
        async with self._session_factory() as session:
            session.add(model)
            await session.commit()
            await session.refresh(model)
        return self._to_entity(model)

    async def get_all(
        self,
        *,
        feature: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[AIRequestLog]:
        stmt = select(AIRequestLogModel)
        if feature:
            stmt = stmt.where(AIRequestLogModel.feature == feature)
        stmt = (
            stmt.order_by(AIRequestLogModel.created_at.desc(), AIRequestLogModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]
