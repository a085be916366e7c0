"""Pydantic schemas for attendance resources."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from studiodesk.db.models.enums import AttendanceStatus
from studiodesk.schemas.common import MemberSummary


class CheckInRequest(BaseModel):
    """Payload for the check-in endpoint."""

    session_id: UUID = Field(..., description="Session identifier")
    member_id: UUID = Field(..., description="Member identifier")


class SessionSummary(BaseModel):
    id: UUID
    class_type: str
    starts_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AttendanceRead(BaseModel):
    """Schema returned when reading an attendance record."""

    id: UUID = Field(..., description="Attendance identifier")
    studio_id: UUID = Field(..., description="Studio identifier")
    session_id: UUID = Field(..., description="Session identifier")
    member_id: UUID = Field(..., description="Member identifier")
    status: AttendanceStatus = Field(..., description="Attendance status")
    checked_in_at: datetime = Field(..., description="Check-in timestamp")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    member: Optional[MemberSummary] = None
    session: Optional[SessionSummary] = None

    model_config = ConfigDict(from_attributes=True)


class CheckInResponse(BaseModel):
    data: AttendanceRead
    already_checked_in: bool = Field(
        default=False, description="True when the check-in already existed"
    )


class AttendanceResponse(BaseModel):
    data: AttendanceRead


class AttendanceListResponse(BaseModel):
    data: list[AttendanceRead]
