"""Pydantic schemas for member resources."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from studiodesk.db.models.enums import MemberStatus
from studiodesk.schemas.common import blank_to_none, upper_enum


class MemberCreate(BaseModel):
    """Schema for registering a member. Blank email or phone count as absent."""

    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    status: MemberStatus = MemberStatus.ACTIVE

    @field_validator("first_name", "last_name")
    @classmethod
    def require_name(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} is required")
        return value

    @field_validator("email", "phone", mode="before")
    @classmethod
    def drop_blank(cls, value):
        return blank_to_none(value)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return upper_enum(value)


class MemberUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    status: Optional[MemberStatus] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def reject_empty_name(cls, value: Optional[str], info) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} cannot be empty")
        return value

    @field_validator("email", "phone", mode="before")
    @classmethod
    def drop_blank(cls, value):
        return blank_to_none(value)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return upper_enum(value)

    @model_validator(mode="after")
    def require_change(self) -> "MemberUpdate":
        if not self.changes():
            raise ValueError("at least one field is required")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class MemberRead(BaseModel):
    id: UUID
    studio_id: UUID
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: MemberStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MemberResponse(BaseModel):
    data: MemberRead


class MemberListResponse(BaseModel):
    data: list[MemberRead]
