"""Repository utilities for attendance records."""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from studiodesk.db.models.attendance import Attendance
from studiodesk.db.models.enums import AttendanceStatus


def _with_relations(query):
    return query.options(
        selectinload(Attendance.member), selectinload(Attendance.session)
    ).execution_options(populate_existing=True)


class AttendanceRepo:
    """Data-access helpers for :class:`Attendance`."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, studio_id: UUID, attendance_id: UUID) -> Attendance | None:
        result = await self.session.execute(
            _with_relations(select(Attendance)).where(
                Attendance.id == attendance_id, Attendance.studio_id == studio_id
            )
        )
        return result.scalar_one_or_none()

    async def get_by_natural_key(
        self, studio_id: UUID, session_id: UUID, member_id: UUID
    ) -> Attendance | None:
        result = await self.session.execute(
            _with_relations(select(Attendance)).where(
                Attendance.studio_id == studio_id,
                Attendance.session_id == session_id,
                Attendance.member_id == member_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_studio(
        self,
        studio_id: UUID,
        status: Optional[AttendanceStatus] = None,
        session_id: Optional[UUID] = None,
        member_id: Optional[UUID] = None,
    ) -> list[Attendance]:
        query = _with_relations(select(Attendance)).where(
            Attendance.studio_id == studio_id
        )
        if status is not None:
            query = query.where(Attendance.status == status)
        if session_id is not None:
            query = query.where(Attendance.session_id == session_id)
        if member_id is not None:
            query = query.where(Attendance.member_id == member_id)
        result = await self.session.execute(
            query.order_by(Attendance.created_at.desc(), Attendance.checked_in_at.desc())
        )
        return list(result.scalars().all())

    async def create_checked_in(
        self,
        studio_id: UUID,
        session_id: UUID,
        member_id: UUID,
        checked_in_at: datetime,
    ) -> Attendance:
        """Insert a CHECKED_IN row.

        Flushes immediately so a natural-key collision surfaces here as
        :class:`sqlalchemy.exc.IntegrityError`.
        """

        attendance = Attendance(
            studio_id=studio_id,
            session_id=session_id,
            member_id=member_id,
            status=AttendanceStatus.CHECKED_IN,
            checked_in_at=checked_in_at,
        )
        self.session.add(attendance)
        await self.session.flush()
        return attendance

    async def set_status(
        self, attendance: Attendance, status: AttendanceStatus
    ) -> Attendance:
        attendance.status = status
        self.session.add(attendance)
        await self.session.flush()
        return attendance
