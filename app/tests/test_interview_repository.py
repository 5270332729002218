"""Tests for persisting interview records to a temporary SQLite database."""
import asyncio

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import select

from app.core.db import init_db
from app.core.exceptions import PersistenceError
from app.models import InterviewRow
from app.schemas.interview import InterviewRecord
from app.services.storage.interview_repository import InterviewRepository

RECORD = InterviewRecord(
    role="Backend Engineer",
    type="technical",
    level="senior",
    techstack=["Go", "Postgres"],
    questions=["How do you tune Postgres queries?", "How do goroutines communicate?"],
    user_id="user-42",
    finalized=True,
    cover_image="/reddit.png",
    created_at="2024-03-15T10:00:00+00:00",
)


def test_add_persists_record(tmp_path):
    async def scenario():
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'interviews.db'}")
        session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
        try:
            await init_db(engine)
            record_id = await InterviewRepository(session_factory=session_factory).add(RECORD)
            async with session_factory() as session:
                rows = (await session.execute(select(InterviewRow))).scalars().all()
        finally:
            await engine.dispose()
        return record_id, rows

    record_id, rows = asyncio.run(scenario())

    assert len(rows) == 1
    row = rows[0]
    assert row.id == record_id
    assert row.role == "Backend Engineer"
    assert row.techstack == ["Go", "Postgres"]
    assert row.questions == RECORD.questions
    assert row.user_id == "user-42"
    assert row.finalized is True
    assert row.cover_image == "/reddit.png"
    assert row.created_at == "2024-03-15T10:00:00+00:00"


def test_each_add_creates_new_record(tmp_path):
    async def scenario():
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'interviews.db'}")
        session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
        try:
            await init_db(engine)
            repository = InterviewRepository(session_factory=session_factory)
            return [await repository.add(RECORD), await repository.add(RECORD)]
        finally:
            await engine.dispose()

    first_id, second_id = asyncio.run(scenario())
    assert first_id != second_id


def test_write_failure_raises_persistence_error(tmp_path):
    async def scenario():
        # Tables never created, so the insert fails
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
        try:
            await InterviewRepository(session_factory=session_factory).add(RECORD)
        finally:
            await engine.dispose()

    with pytest.raises(PersistenceError) as exc_info:
        asyncio.run(scenario())
    assert isinstance(exc_info.value.__cause__, OperationalError)
    assert exc_info.value.message.startswith("Failed to save interview")
