"""Attendance listing and cancellation."""
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.core.exceptions import InvalidStateError, NotFoundError
from studiodesk.db.models.attendance import Attendance
from studiodesk.db.models.enums import AttendanceStatus
from studiodesk.repositories.attendance_repo import AttendanceRepo

logger = logging.getLogger(__name__)


class AttendanceService:
    """Reads and cancels attendance records within one studio."""

    def __init__(self, session: AsyncSession) -> None:
        self.repo = AttendanceRepo(session)

    async def list_for_studio(
        self,
        studio_id: UUID,
        status: Optional[AttendanceStatus] = None,
        session_id: Optional[UUID] = None,
        member_id: Optional[UUID] = None,
    ) -> list[Attendance]:
        return await self.repo.list_for_studio(
            studio_id, status=status, session_id=session_id, member_id=member_id
        )

    async def cancel(self, studio_id: UUID, attendance_id: UUID) -> Attendance:
        """Mark an attendance record as CANCELLED.

        The class consumed by the check-in is not given back to the contract.
        Credit corrections are a manual administrative action.
        """

        attendance = await self.repo.get(studio_id, attendance_id)
        if attendance is None:
            raise NotFoundError("attendance record not found")
        if attendance.status == AttendanceStatus.CANCELLED:
            raise InvalidStateError("attendance is already cancelled")

        attendance = await self.repo.set_status(attendance, AttendanceStatus.CANCELLED)
        logger.info("Attendance %s cancelled (studio %s)", attendance_id, studio_id)
        return attendance
