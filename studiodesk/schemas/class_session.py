"""Pydantic schemas for scheduled class sessions."""
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from studiodesk.db.models.enums import SessionStatus
from studiodesk.schemas.common import blank_to_none, upper_enum


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read naive timestamps as UTC and convert aware ones to UTC."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ClassSessionCreate(BaseModel):
    """Schema for scheduling a session.

    ``ends_at`` is optional but must fall after ``starts_at`` when given.
    """

    class_type: str = Field(..., description="Class name shown on the schedule")
    coach: Optional[str] = None
    starts_at: datetime
    ends_at: Optional[datetime] = None
    capacity: int = Field(..., gt=0, description="Maximum attendees")
    status: SessionStatus = SessionStatus.SCHEDULED

    @field_validator("class_type")
    @classmethod
    def require_class_type(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("class_type is required")
        return value

    @field_validator("coach", mode="before")
    @classmethod
    def drop_blank_coach(cls, value):
        return blank_to_none(value)

    @field_validator("starts_at", "ends_at")
    @classmethod
    def normalize_timestamp(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return upper_enum(value)

    @model_validator(mode="after")
    def check_window(self) -> "ClassSessionCreate":
        if self.ends_at is not None and self.ends_at <= self.starts_at:
            raise ValueError("ends_at must be after starts_at")
        return self


class ClassSessionRead(BaseModel):
    id: UUID
    studio_id: UUID
    class_type: str
    coach: Optional[str] = None
    starts_at: datetime
    ends_at: Optional[datetime] = None
    capacity: int
    status: SessionStatus

    model_config = ConfigDict(from_attributes=True)


class ClassSessionResponse(BaseModel):
    data: ClassSessionRead


class ClassSessionListResponse(BaseModel):
    data: list[ClassSessionRead]
