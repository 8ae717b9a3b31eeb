"""SQLAlchemy AI request log repository against in-memory SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from sinjapan_manager.domain.entities import AIRequestLog
from sinjapan_manager.infrastructure.database import AIRequestLogModel, Base
from sinjapan_manager.infrastructure.database.repositories import SQLAlchemyAIRequestLogRepository


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


def _log(feature: str, minutes_ago: int, **kwargs) -> AIRequestLog:
    return AIRequestLog(
        feature=feature,
        provider="backend",
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_create_assigns_id_and_keeps_fields(session_factory):
    repo = SQLAlchemyAIRequestLogRepository(session_factory)

    saved = await repo.create(
        _log("translation", 0, model="gpt-4o", total_tokens=42, user_id="7", status="error",
             error_message="quota")
    )

    assert saved.id is not None
    assert saved.model == "gpt-4o"
    assert saved.total_tokens == 42
    assert saved.user_id == "7"
    assert saved.error_message == "quota"


@pytest.mark.asyncio
async def test_get_all_newest_first_with_feature_filter(session_factory):
    repo = SQLAlchemyAIRequestLogRepository(session_factory)
    await repo.create(_log("tasks", 30))
    await repo.create(_log("study", 20))
    await repo.create(_log("tasks", 10))

    everything = await repo.get_all()
    tasks_only = await repo.get_all(feature="tasks")

    assert [log.feature for log in everything] == ["tasks", "study", "tasks"]
    assert len(tasks_only) == 2
    assert tasks_only[0].created_at > tasks_only[1].created_at


@pytest.mark.asyncio
async def test_get_all_paginates(session_factory):
    repo = SQLAlchemyAIRequestLogRepository(session_factory)
    for minutes in range(5):
        await repo.create(_log("study", minutes))

    page = await repo.get_all(skip=1, limit=2)

    assert len(page) == 2


@pytest.mark.asyncio
async def test_created_log_is_committed(session_factory):
    repo = SQLAlchemyAIRequestLogRepository(session_factory)
    await repo.create(_log("chat", 0, status="error", error_message="AI down"))

    async with session_factory() as other:
        await other.rollback()
        count = await other.scalar(select(func.count()).select_from(AIRequestLogModel))

    assert count == 1
