"""Attendance model recording one check-in per member and session."""
from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studiodesk.db.base import Base
from studiodesk.db.models.enums import AttendanceStatus


class Attendance(Base):
    """Check-in event. Never deleted; only cancellation mutates it."""

    __tablename__ = "attendance"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    studio_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("sessions.id"), nullable=False
    )
    member_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("members.id"), nullable=False
    )
    status: Mapped[AttendanceStatus] = mapped_column(
        Enum(AttendanceStatus, native_enum=False, length=16),
        nullable=False,
        default=AttendanceStatus.CHECKED_IN,
    )
    checked_in_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    member: Mapped["Member"] = relationship("Member", lazy="raise")
    session: Mapped["ClassSession"] = relationship("ClassSession", lazy="raise")

    __table_args__ = (
        UniqueConstraint(
            "studio_id", "session_id", "member_id", name="uq_attendance_natural_key"
        ),
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Attendance {self.id} member={self.member_id} status={self.status}>"
