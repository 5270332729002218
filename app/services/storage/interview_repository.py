"""Persistence for generated interviews."""

import logging
from typing import Any, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.db import get_session
from app.core.exceptions import PersistenceError
from app.models import InterviewRow
from app.schemas.interview import InterviewRecord


class InterviewRepository:
    """
    Writes interview records to the document store.

    Records are insert-only: this service never updates or deletes them.
    """

    def __init__(self, session_factory: Callable[[], Any] = get_session, logger: Optional[logging.Logger] = None):
        """
        Args:
            session_factory: Callable returning an async context manager that yields an AsyncSession
            logger: Logger instance (optional)
        """
        self._session_factory = session_factory
        self.logger = logger or logging.getLogger(__name__)

    async def add(self, record: InterviewRecord) -> str:
        """
        Insert a record and return its generated id.

        Raises:
            PersistenceError: If the write fails.
        """
        row = InterviewRow(
            role=record.role,
            type=record.type,
            level=record.level,
            techstack=list(record.techstack),
            questions=list(record.questions),
            user_id=record.user_id,
            finalized=record.finalized,
            cover_image=record.cover_image,
            created_at=record.created_at,
        )
        row_id = row.id
        try:
            async with self._session_factory() as session:
                session.add(row)
                await session.commit()
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to save interview for user '{record.user_id}': {e}")
            raise PersistenceError(f"Failed to save interview: {e}") from e

        self.logger.info(f"Saved interview {row_id} ({len(record.questions)} questions) for user '{record.user_id}'")
        return row_id
