"""Scheduled class session model."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Enum, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from studiodesk.db.base import Base
from studiodesk.db.models.enums import SessionStatus


class ClassSession(Base):
    """A single scheduled occurrence of a class."""

    __tablename__ = "sessions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    studio_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    class_type: Mapped[str] = mapped_column(String, nullable=False)
    coach: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    starts_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ends_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[SessionStatus] = mapped_column(
        Enum(SessionStatus, native_enum=False, length=16),
        nullable=False,
        default=SessionStatus.SCHEDULED,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        CheckConstraint(
            "ends_at IS NULL OR ends_at > starts_at", name="ck_session_ends_after_start"
        ),
        CheckConstraint("capacity > 0", name="ck_session_capacity_positive"),
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<ClassSession {self.id} {self.class_type} status={self.status}>"
