"""Class schedule operations."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.core.exceptions import InvalidStateError, NotFoundError
from studiodesk.db.models.class_session import ClassSession
from studiodesk.db.models.enums import SessionStatus
from studiodesk.repositories.session_repo import ClassSessionRepo
from studiodesk.schemas.class_session import ClassSessionCreate

logger = logging.getLogger(__name__)


def _day_start(day: dt.date) -> dt.datetime:
    return dt.datetime.combine(day, dt.time.min, tzinfo=dt.timezone.utc)


class ClassSessionService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.sessions = ClassSessionRepo(session)

    async def list_for_studio(
        self,
        studio_id: UUID,
        status: Optional[SessionStatus] = None,
        date_from: Optional[dt.date] = None,
        date_to: Optional[dt.date] = None,
    ) -> list[ClassSession]:
        """List sessions starting on or between two UTC calendar days, both inclusive."""

        return await self.sessions.list_for_studio(
            studio_id,
            status=status,
            starts_from=_day_start(date_from) if date_from else None,
            starts_before=_day_start(date_to + dt.timedelta(days=1)) if date_to else None,
        )

    async def create(self, studio_id: UUID, body: ClassSessionCreate) -> ClassSession:
        class_session = await self.sessions.create(
            ClassSession(studio_id=studio_id, **body.model_dump())
        )
        logger.info(
            "Session %s scheduled at %s (studio %s)",
            class_session.id,
            class_session.starts_at,
            studio_id,
        )
        return class_session

    async def get(self, studio_id: UUID, session_id: UUID) -> ClassSession:
        class_session = await self.sessions.get(studio_id, session_id)
        if class_session is None:
            raise NotFoundError("session not found")
        return class_session

    async def cancel(self, studio_id: UUID, session_id: UUID) -> ClassSession:
        class_session = await self.get(studio_id, session_id)
        if class_session.status == SessionStatus.CANCELLED:
            raise InvalidStateError("session is already cancelled")

        class_session.status = SessionStatus.CANCELLED
        await self.session.flush()
        logger.info("Session %s cancelled (studio %s)", session_id, studio_id)
        return class_session
