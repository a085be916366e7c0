"""Repository for scheduled class sessions."""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.db.models.class_session import ClassSession
from studiodesk.db.models.enums import SessionStatus


class ClassSessionRepo:
    """Data-access helpers for :class:`ClassSession`."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, studio_id: UUID, session_id: UUID) -> ClassSession | None:
        result = await self.session.execute(
            select(ClassSession).where(
                ClassSession.id == session_id,
                ClassSession.studio_id == studio_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_studio(
        self,
        studio_id: UUID,
        status: Optional[SessionStatus] = None,
        starts_from: Optional[datetime] = None,
        starts_before: Optional[datetime] = None,
    ) -> list[ClassSession]:
        """Sessions of a studio in schedule order.

        ``starts_from`` is inclusive, ``starts_before`` exclusive.
        """

        query = select(ClassSession).where(ClassSession.studio_id == studio_id)
        if status is not None:
            query = query.where(ClassSession.status == status)
        if starts_from is not None:
            query = query.where(ClassSession.starts_at >= starts_from)
        if starts_before is not None:
            query = query.where(ClassSession.starts_at < starts_before)
        result = await self.session.execute(query.order_by(ClassSession.starts_at.asc()))
        return list(result.scalars().all())

    async def create(self, class_session: ClassSession) -> ClassSession:
        self.session.add(class_session)
        await self.session.flush()
        await self.session.refresh(class_session)
        return class_session
